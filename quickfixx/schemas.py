from datetime import datetime
from typing import ClassVar, List, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field, model_validator
from pydantic.alias_generators import to_camel


class ApiModel(BaseModel):
    """Wire models speak camelCase but accept snake_case too."""

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        from_attributes=True,
    )


class PartialModel(ApiModel):
    # Fields where an explicit null is a real value rather than "leave unchanged".
    nullable_fields: ClassVar[frozenset] = frozenset()

    def changes(self) -> dict:
        return {
            k: v
            for k, v in self.model_dump(exclude_unset=True).items()
            if v is not None or k in self.nullable_fields
        }


class Message(BaseModel):
    message: str


# ---- Auth ----

class Login(ApiModel):
    username: str
    password: str


class RegisterAdmin(ApiModel):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)


class AdminOut(ApiModel):
    id: str
    username: str


class SessionUser(BaseModel):
    user: AdminOut


class ChangePassword(ApiModel):
    current_password: str = Field(min_length=1)
    new_password: str = Field(min_length=6)
    confirm_password: str = Field(min_length=6)

    @model_validator(mode="after")
    def passwords_match(self):
        if self.new_password != self.confirm_password:
            raise ValueError("Passwords don't match")
        return self


class CreateStaffUser(ApiModel):
    username: str = Field(min_length=3)
    password: str = Field(min_length=6)
    name: str = Field(min_length=1)
    role: str = Field(min_length=1)


class StaffUserOut(ApiModel):
    id: str
    username: str
    name: str
    role: str
    created_at: datetime


# ---- Services ----

class CreateService(ApiModel):
    title: str
    description: str
    price: int = Field(ge=0)
    image_url: str
    image_urls: List[str] = Field(default_factory=list)
    category: str
    is_active: bool = True


class UpdateService(PartialModel):
    title: Optional[str] = None
    description: Optional[str] = None
    price: Optional[int] = Field(default=None, ge=0)
    image_url: Optional[str] = None
    image_urls: Optional[List[str]] = None
    category: Optional[str] = None
    is_active: Optional[bool] = None


class ServiceOut(ApiModel):
    id: str
    title: str
    description: str
    price: int
    image_url: str
    image_urls: List[str]
    category: str
    is_active: bool
    created_at: datetime


# ---- Packages ----

class CreatePackage(ApiModel):
    name: str
    description: str
    original_price: int = Field(ge=0)
    discounted_price: int = Field(ge=0)
    features: List[str]
    is_popular: bool = False
    is_active: bool = True

    @model_validator(mode="after")
    def discount_not_above_original(self):
        if self.discounted_price > self.original_price:
            raise ValueError("Discounted price cannot exceed original price")
        return self


class UpdatePackage(PartialModel):
    name: Optional[str] = None
    description: Optional[str] = None
    original_price: Optional[int] = Field(default=None, ge=0)
    discounted_price: Optional[int] = Field(default=None, ge=0)
    features: Optional[List[str]] = None
    is_popular: Optional[bool] = None
    is_active: Optional[bool] = None


class PackageOut(ApiModel):
    id: str
    name: str
    description: str
    original_price: int
    discounted_price: int
    features: List[str]
    is_popular: bool
    is_active: bool
    created_at: datetime


# ---- Staff ----

class CreateStaff(ApiModel):
    employee_id: str = Field(min_length=1)
    name: str
    role: str
    bio: str
    image_url: str
    expertise: List[str]
    is_active: bool = True


class UpdateStaff(PartialModel):
    employee_id: Optional[str] = Field(default=None, min_length=1)
    name: Optional[str] = None
    role: Optional[str] = None
    bio: Optional[str] = None
    image_url: Optional[str] = None
    expertise: Optional[List[str]] = None
    is_active: Optional[bool] = None


class StaffOut(ApiModel):
    id: str
    employee_id: str
    name: str
    role: str
    bio: str
    image_url: str
    expertise: List[str]
    is_active: bool
    created_at: datetime


# ---- Gallery ----

GALLERY_MEDIA_REQUIRED = "At least one of: before image, after image, or video is required"


def has_media(before: Optional[str], after: Optional[str], video: Optional[str]) -> bool:
    return bool(before or after or video)


class CreateGallery(ApiModel):
    before_image_url: Optional[str] = ""
    after_image_url: Optional[str] = ""
    video_url: Optional[str] = ""
    title: str = Field(min_length=1)
    description: str = Field(min_length=1)
    is_active: bool = True

    @model_validator(mode="after")
    def requires_media(self):
        if not has_media(self.before_image_url, self.after_image_url, self.video_url):
            raise ValueError(GALLERY_MEDIA_REQUIRED)
        return self


class UpdateGallery(PartialModel):
    nullable_fields: ClassVar[frozenset] = frozenset({"before_image_url", "after_image_url", "video_url"})

    before_image_url: Optional[str] = None
    after_image_url: Optional[str] = None
    video_url: Optional[str] = None
    title: Optional[str] = Field(default=None, min_length=1)
    description: Optional[str] = Field(default=None, min_length=1)
    is_active: Optional[bool] = None


class GalleryOut(ApiModel):
    id: str
    before_image_url: Optional[str] = None
    after_image_url: Optional[str] = None
    video_url: Optional[str] = None
    title: str
    description: str
    is_active: bool
    created_at: datetime


# ---- Testimonials ----

class CreateTestimonial(ApiModel):
    customer_name: str
    rating: int = Field(ge=1, le=5)
    comment: str
    service_type: str
    is_active: bool = True


class UpdateTestimonial(PartialModel):
    customer_name: Optional[str] = None
    rating: Optional[int] = Field(default=None, ge=1, le=5)
    comment: Optional[str] = None
    service_type: Optional[str] = None
    is_active: Optional[bool] = None


class TestimonialOut(ApiModel):
    id: str
    customer_name: str
    rating: int
    comment: str
    service_type: str
    is_active: bool
    created_at: datetime


# ---- Bookings ----

class CreateBooking(ApiModel):
    # Map pins arrive as numbers from some clients; they are stored as text.
    model_config = ConfigDict(coerce_numbers_to_str=True)

    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    customer_address: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    service_type: str
    preferred_date: str
    preferred_time: str
    details: Optional[str] = None


class UpdateBookingStatus(ApiModel):
    status: Optional[str] = None


class BookingOut(ApiModel):
    id: str
    customer_name: str
    customer_phone: str
    customer_email: Optional[str] = None
    customer_address: str
    latitude: Optional[str] = None
    longitude: Optional[str] = None
    service_type: str
    preferred_date: str
    preferred_time: str
    details: Optional[str] = None
    status: str
    created_at: datetime


# ---- Contact / Branding ----

class UpsertContactInfo(ApiModel):
    phone: str = Field(min_length=1)
    whatsapp: str = Field(min_length=1)
    email: EmailStr
    facebook: str = Field(min_length=1)
    instagram: str = Field(min_length=1)
    tiktok: Optional[str] = ""
    linkedin: Optional[str] = ""
    twitter: Optional[str] = ""
    youtube: Optional[str] = ""


class ContactInfoOut(ApiModel):
    id: str
    phone: str
    whatsapp: str
    email: str
    facebook: str
    instagram: str
    tiktok: Optional[str] = ""
    linkedin: Optional[str] = ""
    twitter: Optional[str] = ""
    youtube: Optional[str] = ""
    updated_at: datetime


class UpsertBranding(ApiModel):
    brand_name: str = Field(min_length=1)
    logo_url: Optional[str] = ""


class BrandingOut(ApiModel):
    id: Optional[str] = None
    brand_name: str
    logo_url: Optional[str] = ""
    updated_at: Optional[datetime] = None


# ---- QR ----

class StaffQrCode(ApiModel):
    qr_code: str
    url: str
