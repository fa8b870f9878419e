from pydantic import BaseModel, ConfigDict


class QueryOptions(BaseModel):
    """Options sent as URL query parameters; unset (None) values are omitted."""

    model_config = ConfigDict(populate_by_name=True)

    def to_params(self) -> dict:
        params = {}
        for key, value in self.model_dump(by_alias=True, exclude_none=True).items():
            if isinstance(value, bool):
                value = "true" if value else "false"
            params[key] = value
        return params


class VendorOptions(QueryOptions):
    # Filled in by the client from its settings.
    vendor_id: int | None = None
    vendor_auth_code: str | None = None


class Envelope(BaseModel):
    success: bool


class Payment(BaseModel):
    amount: float = 0
    currency: str = ""
    date: str = ""


class Price(BaseModel):
    gross: float = 0
    net: float = 0
    tax: float = 0
