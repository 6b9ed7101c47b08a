from __future__ import annotations

SANDBOX_BASE_URL = "https://api.sandbox.bingplaces.com/trustedPartnerApi/v1"
PRODUCTION_BASE_URL = "https://api.bingplaces.com/trustedPartnerApi/v1"

SDK_CLIENT_NAME = "bing-places-python"
SDK_VERSION = "1.0.0"

CLIENT_HEADER = "X-BingApis-SDK-Client"
CLIENT_VERSION_HEADER = "X-BingApis-SDK-ClientVersion"
CLIENT_REQUEST_ID_HEADER = "X-BingApis-SDK-ClientRequestId"
IDENTITY_HEADER = "X-BingApis-SDK-Identity"

CREATE_BUSINESSES_PATH = "/CreateBusinesses"
UPDATE_BUSINESSES_PATH = "/UpdateBusinesses"
GET_BUSINESSES_PATH = "/GetBusinesses"
GET_BUSINESS_STATUS_INFO_PATH = "/GetBusinessStatusInfo"
GET_ANALYTICS_PATH = "/GetAnalytics"
DELETE_BUSINESSES_PATH = "/DeleteBusinesses"
CREATE_BULK_CHAIN_PATH = "/CreateBulkChain"
UPDATE_BULK_CHAIN_INFO_PATH = "/UpdateBulkChainInfo"

MIN_BATCH_SIZE = 1
MAX_BATCH_SIZE = 1000
MIN_PAGE_NUMBER = 1
MIN_PAGE_SIZE = 1
MAX_PAGE_SIZE = 1000
MIN_CHAIN_LOCATIONS = 10
