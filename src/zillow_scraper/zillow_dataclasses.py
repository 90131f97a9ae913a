from dataclasses import dataclass
from dataclasses_json import LetterCase, dataclass_json


@dataclass_json(letter_case=LetterCase.CAMEL)
@dataclass
class ZillowListing:
    name: str
    price: str | int | float
    property_type: str
    detail_url: str | None = None
