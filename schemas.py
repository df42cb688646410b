from datetime import date
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, constr, field_validator, model_validator


# --- Хранимые записи (строки CSV как есть) ---
class OrderRecord(BaseModel):
    """Заказ в том виде, в каком он лежит в orders.csv: все поля строковые, без проверок."""
    model_config = ConfigDict(populate_by_name=True)

    order_code: str = Field("", alias="OrderCode")
    starttime: str = ""
    endtime: str = ""
    display_info: str = ""
    resource: str = ""
    color: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def _as_text(cls, value):
        # клиент может прислать число или null — храним строку
        if value is None:
            return ""
        return str(value)


class Snapshot(BaseModel):
    resources: List[str] = Field(default_factory=list)
    dates: List[str] = Field(default_factory=list)  # [start, end] или пусто
    orders: List[OrderRecord] = Field(default_factory=list)

    @field_validator("resources", "dates", mode="before")
    @classmethod
    def _none_as_empty(cls, value):
        return [] if value is None else value


class SaveResult(BaseModel):
    success: bool = True
    message: str = "data saved"


# --- Входные (create/update) ---
class ResourceIn(BaseModel):
    name: constr(strip_whitespace=True, min_length=1)


class DateRangeIn(BaseModel):
    start: date
    end: date

    @model_validator(mode="after")
    def _check_order(self):
        if self.start > self.end:
            raise ValueError("start date must not be later than end date")
        return self


class OrderCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    order_code: Optional[constr(strip_whitespace=True, min_length=1)] = Field(None, alias="OrderCode")
    display_info: constr(strip_whitespace=True, min_length=1)
    resource: constr(strip_whitespace=True, min_length=1)
    starttime: date
    endtime: date
    color: Optional[str] = None

    @model_validator(mode="after")
    def _check_dates(self):
        if self.starttime > self.endtime:
            raise ValueError("starttime must not be later than endtime")
        return self


class OrderUpdate(BaseModel):
    display_info: constr(strip_whitespace=True, min_length=1)
    resource: constr(strip_whitespace=True, min_length=1)
    starttime: date
    endtime: date
    color: Optional[str] = None

    @model_validator(mode="after")
    def _check_dates(self):
        if self.starttime > self.endtime:
            raise ValueError("starttime must not be later than endtime")
        return self


class DropIn(BaseModel):
    # координаты левого верхнего угла бруска относительно сетки дат (с заголовком)
    x: float = Field(allow_inf_nan=False)
    y: float = Field(allow_inf_nan=False)


# --- Выходные (response) ---
class DateRangeModel(BaseModel):
    start: date
    end: date
    days: int


class StatsModel(BaseModel):
    resources: int
    orders: int
    days: int
    start: Optional[str] = None
    end: Optional[str] = None


class BarModel(BaseModel):
    order_code: str
    left: int
    top: int
    width: int
    height: int
    color: str
    label: str
    resource_tag: str
    title: str


class ChartModel(BaseModel):
    calendar: List[str] = Field(default_factory=list)
    rows: List[str] = Field(default_factory=list)
    bars: List[BarModel] = Field(default_factory=list)
    hidden: List[str] = Field(default_factory=list)  # OrderCode заказов, которые не попали в сетку
    stats: StatsModel
