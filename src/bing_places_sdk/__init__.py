from .client import BingPlacesClient
from .config import ClientConfig, ConfigError, Environment, load_config
from .constants import PRODUCTION_BASE_URL, SANDBOX_BASE_URL, SDK_VERSION
from .exceptions import (
    BingPlacesError,
    InvalidArgumentError,
    InvalidEmailError,
    InvalidIdentityError,
    RemoteOperationFailed,
    ValidationIssue,
)
from .http_client import HttpClient, LastOperation
from .models import ApiResponse, Identity, ResponseOutcome, SearchCriteria, SearchCriteriaType
from .models_businesses import (
    Amenity,
    BusinessCategory,
    BusinessListing,
    Categories,
    CreateBusinessesResponse,
    CreatedBusinessStatus,
    DeleteBusinessesResponse,
    DeleteBusinessStatus,
    FetchBusinessesResponse,
    HolidayHoursTimePeriod,
    UpdateBusinessesResponse,
    ValidationError,
)
from .models_chains import BulkChainResponse, ChainInfo
from .models_insights import (
    BusinessAnalytics,
    BusinessStatus,
    BusinessStatusInfo,
    FetchBusinessStatusInfoResponse,
    GetAnalyticsResponse,
)
from .session import PlacesSession
from .validation import is_email_valid

__version__ = SDK_VERSION

__all__ = [
    "Amenity",
    "ApiResponse",
    "BingPlacesClient",
    "BingPlacesError",
    "BulkChainResponse",
    "BusinessAnalytics",
    "BusinessCategory",
    "BusinessListing",
    "BusinessStatus",
    "BusinessStatusInfo",
    "Categories",
    "ChainInfo",
    "ClientConfig",
    "ConfigError",
    "CreateBusinessesResponse",
    "CreatedBusinessStatus",
    "DeleteBusinessStatus",
    "DeleteBusinessesResponse",
    "Environment",
    "FetchBusinessStatusInfoResponse",
    "FetchBusinessesResponse",
    "GetAnalyticsResponse",
    "HolidayHoursTimePeriod",
    "HttpClient",
    "Identity",
    "InvalidArgumentError",
    "InvalidEmailError",
    "InvalidIdentityError",
    "LastOperation",
    "PRODUCTION_BASE_URL",
    "PlacesSession",
    "RemoteOperationFailed",
    "ResponseOutcome",
    "SANDBOX_BASE_URL",
    "SearchCriteria",
    "SearchCriteriaType",
    "UpdateBusinessesResponse",
    "ValidationError",
    "ValidationIssue",
    "is_email_valid",
    "load_config",
]
