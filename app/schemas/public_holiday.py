from pydantic import BaseModel, Field
from typing import Optional, List


class PublicHoliday(BaseModel):
    """Full holiday record as returned by the upstream API"""
    name: str = Field(..., description="English name of the holiday")
    localName: str = Field(..., description="Name in the local language")
    date: str = Field(..., description="Date in ISO format")
    countryCode: Optional[str] = None
    fixed: Optional[bool] = None
    global_: Optional[bool] = Field(None, alias="global")
    types: List[str] = Field(default_factory=list)
    counties: Optional[List[str]] = None
    launchYear: Optional[int] = None

    class Config:
        frozen = True
        populate_by_name = True


class ShortPublicHoliday(BaseModel):
    """Trimmed holiday returned to callers"""
    name: str
    localName: str
    date: str

    class Config:
        frozen = True


class RequestFilter(BaseModel):
    """Optional caller filters checked before calling upstream"""
    country: Optional[str] = None
    year: Optional[int] = None


class TodayPublicHolidayResponse(BaseModel):
    country: str
    isPublicHoliday: bool


class ErrorResponse(BaseModel):
    detail: str
    error_code: str
