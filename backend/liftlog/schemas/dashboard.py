from datetime import date
from typing import Literal
from pydantic import BaseModel


class MatrixColumn(BaseModel):
    slug: str
    short_label: str


class MatrixRowRead(BaseModel):
    day: date
    label: str
    cells: list[bool]

    model_config = {"from_attributes": True}


class MatrixRead(BaseModel):
    start: date
    today: date
    columns: list[MatrixColumn]
    rows: list[MatrixRowRead]


class CalendarDayRead(BaseModel):
    day: date
    in_range: bool
    filled: bool
    day_number: int | None = None

    model_config = {"from_attributes": True}


class CalendarWeekRead(BaseModel):
    monday: date
    days: list[CalendarDayRead]
    total: int

    model_config = {"from_attributes": True}


class CalendarRead(BaseModel):
    start: date
    today: date
    weeks: list[CalendarWeekRead]


class ChartPointRead(BaseModel):
    day: date
    weight: int
    x: float
    y: float

    model_config = {"from_attributes": True}


class WeightSeriesRead(BaseModel):
    slug: str
    start: date
    status: Literal["ok", "insufficient_data"]
    sample_count: int
    min_weight: int | None = None
    max_weight: int | None = None
    y_min: float | None = None
    y_max: float | None = None
    width: float
    height: float
    points: list[ChartPointRead]
