"""Shared enums for models."""

from enum import Enum


class UserRole(str, Enum):
    """Account role. Values match the wire format."""

    CUSTOMER = "Customer"
    HOTEL_PARTNER = "HotelPartner"
    ADMIN = "Admin"


class AccountStatus(str, Enum):
    """Account standing, managed by admins."""

    ACTIVE = "active"
    SUSPENDED = "suspended"
    INACTIVE = "inactive"


class PartnerStatus(str, Enum):
    """Verification status of a hotel partner application."""

    PENDING = "pending"
    VERIFIED = "verified"
    REJECTED = "rejected"
    SUSPENDED = "suspended"


class DocumentType(str, Enum):
    """Kinds of verification documents a partner can upload."""

    BUSINESS_LICENSE = "business_license"
    TAX_CERTIFICATE = "tax_certificate"
    IDENTITY = "identity"
    PROPERTY_OWNERSHIP = "property_ownership"
    OTHER = "other"


class HotelStatus(str, Enum):
    """Listing visibility of a hotel."""

    ACTIVE = "active"
    INACTIVE = "inactive"
