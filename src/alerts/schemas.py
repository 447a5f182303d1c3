"""
Typed records for the weather provider payload and the API weather snapshot.

Provider records mirror the Visual Crossing timeline response. Every data
field is optional: a field missing upstream becomes None in the snapshot
instead of failing the request. The mapping functions below are pure.
"""

from datetime import datetime, timedelta, timezone, tzinfo
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from pydantic import BaseModel, ConfigDict, Field

Number = int | float

DAILY_FORECAST_DAYS = 7


# ---------- Provider payload ----------
class ProviderRecord(BaseModel):
    """Fields shared by currentConditions, days[] and days[].hours[]."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    datetime_epoch: int | None = Field(default=None, alias="datetimeEpoch")
    temp: Number | None = None
    feelslike: Number | None = None
    humidity: Number | None = None
    precip: Number | None = None
    precipprob: Number | None = None
    snow: Number | None = None
    windspeed: Number | None = None
    winddir: Number | None = None
    pressure: Number | None = None
    visibility: Number | None = None
    uvindex: Number | None = None
    conditions: str | None = None
    icon: str | None = None
    sunrise: str | None = None
    sunset: str | None = None


class ProviderDay(ProviderRecord):
    tempmax: Number | None = None
    tempmin: Number | None = None
    description: str | None = None
    hours: list[ProviderRecord] = []


class TimelinePayload(BaseModel):
    """Top-level timeline API response."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    resolved_address: str | None = Field(default=None, alias="resolvedAddress")
    timezone: str | None = None
    tzoffset: Number | None = None
    current_conditions: ProviderRecord | None = Field(
        default=None, alias="currentConditions"
    )
    days: list[ProviderDay] = []
    error_code: int | None = Field(default=None, alias="errorCode")

    @property
    def is_empty(self) -> bool:
        return self.current_conditions is None and not self.days

    @property
    def is_resolved(self) -> bool:
        """True when the provider found the location and returned data."""
        return self.error_code is None and not self.is_empty


# ---------- API snapshot ----------
class CurrentConditions(BaseModel):
    temp: Number | None = None
    feelslike: Number | None = None
    humidity: Number | None = None
    windspeed: Number | None = None
    winddir: Number | None = None
    pressure: Number | None = None
    uvindex: Number | None = None
    visibility: Number | None = None
    conditions: str | None = None
    icon: str | None = None
    sunrise: str | None = None
    sunset: str | None = None
    precip: Number | None = None
    snow: Number | None = None


class HourlyForecast(BaseModel):
    time: str
    temp: Number | None = None
    feelslike: Number | None = None
    humidity: Number | None = None
    precip: Number | None = None
    precip_prob: Number | None = Field(default=None, serialization_alias="precipProb")
    windspeed: Number | None = None
    winddir: Number | None = None
    conditions: str | None = None
    icon: str | None = None


class DailyForecast(BaseModel):
    date: str
    tempmax: Number | None = None
    tempmin: Number | None = None
    temp: Number | None = None
    feelslike: Number | None = None
    humidity: Number | None = None
    precip: Number | None = None
    precip_prob: Number | None = Field(default=None, serialization_alias="precipProb")
    windspeed: Number | None = None
    winddir: Number | None = None
    conditions: str | None = None
    icon: str | None = None
    sunrise: str | None = None
    sunset: str | None = None
    description: str | None = None


class WeatherSnapshot(BaseModel):
    address: str | None = None
    current_conditions: CurrentConditions = Field(
        serialization_alias="currentConditions"
    )
    hourly: list[HourlyForecast]
    daily: list[DailyForecast]

    def to_response(self) -> dict:
        """JSON-ready dict using the public (camelCase) field names."""
        return self.model_dump(mode="json", by_alias=True)


# ---------- Mapping functions ----------
def resolve_timezone(payload: TimelinePayload) -> tzinfo:
    """Location timezone: IANA name, then fixed offset, then UTC."""
    if payload.timezone:
        try:
            return ZoneInfo(payload.timezone)
        except (ZoneInfoNotFoundError, ValueError):
            pass
    if payload.tzoffset is not None:
        return timezone(timedelta(hours=payload.tzoffset))
    return timezone.utc


def hour_label(epoch: int | None, tz: tzinfo) -> str:
    """Two-digit 12-hour clock label, e.g. '03 PM'."""
    if epoch is None:
        return ""
    return datetime.fromtimestamp(epoch, tz=tz).strftime("%I %p")


def day_label(epoch: int | None, tz: tzinfo) -> str:
    """Long weekday, day and short month, e.g. 'Monday, 14 Oct'."""
    if epoch is None:
        return ""
    moment = datetime.fromtimestamp(epoch, tz=tz)
    return f"{moment:%A}, {moment.day} {moment:%b}"


def current_conditions(payload: TimelinePayload) -> CurrentConditions:
    current = payload.current_conditions or ProviderRecord()
    today = payload.days[0] if payload.days else None

    return CurrentConditions(
        temp=current.temp,
        feelslike=current.feelslike,
        humidity=current.humidity,
        windspeed=current.windspeed,
        winddir=current.winddir,
        pressure=current.pressure,
        uvindex=current.uvindex,
        visibility=current.visibility,
        conditions=current.conditions,
        icon=current.icon,
        sunrise=today.sunrise if today else None,
        sunset=today.sunset if today else None,
        precip=current.precip,
        snow=current.snow,
    )


def hourly_forecast(payload: TimelinePayload) -> list[HourlyForecast]:
    """One record per hour of the first (current) day."""
    if not payload.days:
        return []

    tz = resolve_timezone(payload)
    return [
        HourlyForecast(
            time=hour_label(hour.datetime_epoch, tz),
            temp=hour.temp,
            feelslike=hour.feelslike,
            humidity=hour.humidity,
            precip=hour.precip,
            precip_prob=hour.precipprob,
            windspeed=hour.windspeed,
            winddir=hour.winddir,
            conditions=hour.conditions,
            icon=hour.icon,
        )
        for hour in payload.days[0].hours
    ]


def daily_forecast(
    payload: TimelinePayload, days: int = DAILY_FORECAST_DAYS
) -> list[DailyForecast]:
    tz = resolve_timezone(payload)
    return [
        DailyForecast(
            date=day_label(day.datetime_epoch, tz),
            tempmax=day.tempmax,
            tempmin=day.tempmin,
            temp=day.temp,
            feelslike=day.feelslike,
            humidity=day.humidity,
            precip=day.precip,
            precip_prob=day.precipprob,
            windspeed=day.windspeed,
            winddir=day.winddir,
            conditions=day.conditions,
            icon=day.icon,
            sunrise=day.sunrise,
            sunset=day.sunset,
            description=day.description,
        )
        for day in payload.days[:days]
    ]


def build_snapshot(payload: TimelinePayload) -> WeatherSnapshot:
    return WeatherSnapshot(
        address=payload.resolved_address,
        current_conditions=current_conditions(payload),
        hourly=hourly_forecast(payload),
        daily=daily_forecast(payload),
    )
