import datetime
from dataclasses import dataclass, fields
from typing import Tuple


TIMESTAMP_FIELDS = ("first_seen", "last_announced")
HISTORY_FIELDS = ("uptime_history", "price_history")


@dataclass(frozen=True)
class HostRecord:
    """
    Synthetic profile of one storage host. Values never change after creation.
    """
    id: str
    address: str
    public_key: str
    online: bool
    accepting_contracts: bool
    first_seen: datetime.datetime
    last_announced: datetime.datetime
    country: str
    lat: float
    lng: float
    software_version: str
    protocol_version: str
    total_storage: float
    used_storage: float
    storage_price: float
    ingress_price: float
    egress_price: float
    contract_price: float
    sector_access_price: float
    collateral: float
    max_collateral: float
    upload_speed: int
    download_speed: int
    uptime: float
    reliability: float
    contracts: int
    success_rate: float
    host_score: float
    uptime_history: Tuple[float, ...]
    price_history: Tuple[float, ...]

    def __repr__(self):
        return (
            f'HostRecord('
            f'id: {self.id}, '
            f'address: {self.address}, '
            f'country: {self.country}, '
            f'online: {self.online})'
        )

    def to_json(self):
        """
        Serialize the record into a JSON-safe dict.
        """
        record_json = {}
        for item in fields(self):
            value = getattr(self, item.name)
            if item.name in TIMESTAMP_FIELDS:
                value = value.isoformat()
            elif item.name in HISTORY_FIELDS:
                value = list(value)
            record_json[item.name] = value
        return record_json

    @staticmethod
    def from_json(record_json):
        """
        Rebuild a record from its to_json() form.
        """
        values = {}
        for item in fields(HostRecord):
            if item.name not in record_json:
                raise Exception(f'Host record is missing field: {item.name}')
            value = record_json[item.name]
            if item.name in TIMESTAMP_FIELDS:
                value = datetime.datetime.fromisoformat(value)
            elif item.name in HISTORY_FIELDS:
                value = tuple(value)
            values[item.name] = value
        return HostRecord(**values)
