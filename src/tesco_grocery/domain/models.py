"""Records decoded from grocery API responses."""

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class _Record(BaseModel):
    """Immutable record keyed by the server's PascalCase field names."""

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _drop_nulls(cls, data: object) -> object:
        """Treat explicit nulls like missing fields so defaults apply."""
        if isinstance(data, dict):
            return {key: value for key, value in data.items() if value is not None}
        return data


class Nutrient(_Record):
    """Nutrition fact line, values are free text as sent by the server."""

    nutrient_name: str = Field(default="", alias="NutrientName")
    sample_description: str = Field(default="", alias="SampleDescription")
    sample_size: str = Field(default="", alias="SampleSize")
    serving_description: str = Field(default="", alias="ServingDescription")
    serving_size: str = Field(default="", alias="ServingSize")


class Ingredient(_Record):
    """Single ingredient of a product."""

    name: str = Field(default="", alias="Name")


class Product(_Record):
    """Catalog product returned by a product search.

    ``nutrients``/``ingredients`` are only populated for extended searches.
    The ``*_count`` fields are kept as sent and are not checked against the
    list lengths.
    """

    base_product_id: str = Field(default="", alias="BaseProductId")
    ean_barcode: str = Field(default="", alias="EANBarcode")
    cheaper_alternative_product_id: str = Field(
        default="", alias="CheaperAlternativeProductId"
    )
    cooking_and_usage: str = Field(default="", alias="CookingAndUsage")
    extended_description: str = Field(default="", alias="ExtendedDescription")
    healthier_alternative_product_id: str = Field(
        default="", alias="HealthierAlternativeProductId"
    )
    image_path: str = Field(default="", alias="ImagePath")
    maximum_purchase_quantity: int = Field(default=0, alias="MaximumPurchaseQuantity")
    name: str = Field(default="", alias="Name")
    offer_promotion: str = Field(default="", alias="OfferPromotion")
    offer_validity: str = Field(default="", alias="OfferValidity")
    offer_label_image_path: str = Field(default="", alias="OfferLabelImagePath")
    price: float = Field(default=0.0, alias="Price")
    price_description: str = Field(default="", alias="PriceDescription")
    product_id: str = Field(default="", alias="ProductId")
    product_type: str = Field(default="", alias="ProductType")
    rating: int = Field(default=0, alias="Rating")
    storage_info: str = Field(default="", alias="StorageInfo")
    unit_price: float = Field(default=0.0, alias="UnitPrice")
    unit_type: str = Field(default="", alias="UnitType")
    rda_calories_count: str = Field(default="", alias="RDA_Calories_Count")
    rda_calories_percent: str = Field(default="", alias="RDA_Calories_Percent")
    rda_sugar_grammes: str = Field(default="", alias="RDA_Sugar_Grammes")
    rda_sugar_percent: str = Field(default="", alias="RDA_Sugar_Percent")
    rda_fat_grammes: str = Field(default="", alias="RDA_Fat_Grammes")
    rda_fat_percent: str = Field(default="", alias="RDA_Fat_Percent")
    rda_saturates_grammes: str = Field(default="", alias="RDA_Saturates_Grammes")
    rda_saturates_percent: str = Field(default="", alias="RDA_Saturates_Percent")
    rda_salt_grammes: str = Field(default="", alias="RDA_Salt_Grammes")
    rda_salt_percent: str = Field(default="", alias="RDA_Salt_Percent")
    nutrients_count: int = Field(default=0, alias="NutrientsCount")
    nutrients: tuple[Nutrient, ...] = Field(default=(), alias="Nutrients")
    ingredients_count: int = Field(default=0, alias="IngredientsCount")
    ingredients: tuple[Ingredient, ...] = Field(default=(), alias="Ingredients")


class BasketLine(_Record):
    """Single product line in the basket."""

    basket_line_error_message: str = Field(default="", alias="BasketLineErrorMessage")
    basket_line_guide_price: str = Field(default="", alias="BasketLineGuidePrice")
    basket_line_promo_message: str = Field(default="", alias="BasketLinePromoMessage")
    basket_line_quantity: str = Field(default="", alias="BasketLineQuantity")
    base_product_id: str = Field(default="", alias="BaseProductId")
    ean_barcode: str = Field(default="", alias="EANBarcode")
    image_path: str = Field(default="", alias="ImagePath")
    maximum_purchase_quantity: int = Field(default=0, alias="MaximumPurchaseQuantity")
    name: str = Field(default="", alias="Name")
    offer_promotion: str = Field(default="", alias="OfferPromotion")
    offer_validity: str = Field(default="", alias="OfferValidity")
    price: float = Field(default=0.0, alias="Price")
    price_description: str = Field(default="", alias="PriceDescription")
    product_id: str = Field(default="", alias="ProductId")
    product_type: str = Field(default="", alias="ProductType")
    storage_info: str = Field(default="", alias="StorageInfo")
    unit_price: float = Field(default=0.0, alias="UnitPrice")
    unit_type: str = Field(default="", alias="UnitType")
    note_for_personal_shopper: str = Field(default="", alias="NoteForPersonalShopper")
    substitution_note: str = Field(default="", alias="SubstitutionNote")


class ApiResponse(_Record):
    """Status envelope shared by every response; zero means success."""

    # Strict: a quoted code is a malformed payload unless repaired first.
    status_code: int = Field(default=0, alias="StatusCode", strict=True)
    status_info: str = Field(default="", alias="StatusInfo")

    @property
    def ok(self) -> bool:
        return self.status_code == 0


class LoginResult(ApiResponse):
    """Customer details and the session key issued by LOGIN."""

    branch_number: str = Field(default="", alias="BranchNumber")
    customer_id: str = Field(default="", alias="CustomerId")
    customer_name: str = Field(default="", alias="CustomerName")
    customer_forename: str = Field(default="", alias="CustomerForename")
    session_key: str = Field(default="", alias="SessionKey")
    in_amend_order_mode: str = Field(
        default="",
        validation_alias=AliasChoices("InAmendOrderMode", "InAmmendOrderMode"),
    )
    chosen_delivery_slot_info: str = Field(default="", alias="ChosenDeliverySlotInfo")


class SearchResult(ApiResponse):
    """One page of PRODUCTSEARCH results."""

    page_number: int = Field(default=0, alias="PageNumber")
    total_page_count: int = Field(default=0, alias="TotalPageCount")
    total_product_count: int = Field(default=0, alias="TotalProductCount")
    page_product_count: int = Field(default=0, alias="PageProductCount")
    products: tuple[Product, ...] = Field(default=(), alias="Products")


class ChangeBasketResult(ApiResponse):
    """CHANGEBASKET carries no basket content, only the status."""


class BasketListing(ApiResponse):
    """Basket totals and lines returned by LISTBASKET."""

    basket_id: str = Field(default="", alias="BasketID")
    in_amend_order_mode: str = Field(default="", alias="InAmendOrderMode")
    basket_guide_multi_buy_savings: str = Field(
        default="", alias="BasketGuideMultiBuySavings"
    )
    basket_guide_price: str = Field(default="", alias="BasketGuidePrice")
    basket_quantity: str = Field(default="", alias="BasketQuantity")
    basket_total_clubcard_points: str = Field(
        default="", alias="BasketTotalClubcardPoints"
    )
    basket_lines: tuple[BasketLine, ...] = Field(default=(), alias="BasketLines")
