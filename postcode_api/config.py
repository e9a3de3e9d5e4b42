import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


class Settings:
    # API Configuration
    API_TITLE = "Postcode Lookup API"
    API_VERSION = "1.0.0"
    API_DESCRIPTION = "Look up Australian postcodes, suburbs and states by keyword"

    # Server Configuration
    HOST = os.getenv("HOST", "0.0.0.0")
    PORT = int(os.getenv("PORT", 8080))

    # Upstream Configuration
    POSTCODE_BASE_URL = os.getenv("POSTCODE_BASE_URL", "https://auspost.com.au/postcode/")
    POSTCODE_TABLE_SELECTOR = os.getenv("POSTCODE_TABLE_SELECTOR", "table.fn_tablePostcodeList")

    # Request Configuration
    REQUEST_TIMEOUT = float(os.getenv("REQUEST_TIMEOUT", 10))
    REQUEST_DELAY = float(os.getenv("REQUEST_DELAY", 0.5))

    # Adds table_found to "no results" bodies
    EXPOSE_DIAGNOSTICS = os.getenv("EXPOSE_DIAGNOSTICS", "false").lower() == "true"

    # Logging Configuration
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")

    # User Agent String
    USER_AGENT = os.getenv(
        "USER_AGENT",
        "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36"
    )


# Create settings instance
settings = Settings()
