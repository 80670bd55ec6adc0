from typing import List, Optional, Sequence

from pydantic import BaseModel, ConfigDict, TypeAdapter, field_validator


class Contact(BaseModel):
    name: str = ""
    email: str = ""
    phone: str = ""
    mobile: str = ""
    company: str = ""

    def is_empty(self) -> bool:
        return not any((self.name, self.email, self.phone, self.mobile, self.company))


class PropertyRecord(BaseModel):
    # NaN lat/lon is kept on the model and written out as JSON null.
    model_config = ConfigDict(ser_json_inf_nan="null")

    id: int
    address: str = ""
    town: str = ""
    postcode: str = ""
    lat: float
    lon: float
    types: List[str] = []
    to_let: bool = False
    for_sale: bool = False
    size_from_sqft: Optional[float] = None
    size_to_sqft: Optional[float] = None
    summary: Optional[str] = None
    description: Optional[str] = None
    features: List[str] = []
    rent_psf: Optional[float] = None
    rent: Optional[str] = None
    business_rates_psf: Optional[float] = None
    rateable_value: Optional[float] = None
    service_charge: Optional[str] = None
    estate_charge: Optional[str] = None
    epc_rating: str = ""
    images: List[str] = []
    brochure_url: Optional[str] = None
    contacts: List[Contact] = []
    last_updated: Optional[str] = None

    @field_validator("lat", "lon", mode="before")
    @classmethod
    def _null_coordinate_is_nan(cls, value):
        return float("nan") if value is None else value


PropertyList = TypeAdapter(List[PropertyRecord])


def dump_records(records: Sequence[PropertyRecord]) -> bytes:
    return PropertyList.dump_json(list(records), indent=2, exclude_none=True)


def load_records(payload: bytes | str) -> List[PropertyRecord]:
    return PropertyList.validate_json(payload)
