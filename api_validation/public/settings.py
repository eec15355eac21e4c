"""
Application settings for the document contracts API.
Externalizes config for portability across local/on-prem/cloud.
"""
import os


def _env_flag(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() == "true"


class AppSettings:
    """Application settings with environment variable support."""

    def __init__(self):
        self.api_version: str = os.getenv("API_VERSION", "1.0.0")
        # Render sets RENDER_GIT_COMMIT; fall back to BUILD_COMMIT
        self.build_commit: str = (
            os.getenv("RENDER_GIT_COMMIT")
            or os.getenv("BUILD_COMMIT")
            or "unknown"
        )
        self.environment: str = os.getenv("ENVIRONMENT", "development")
        self.port: int = int(os.getenv("PORT", "8000"))
        self.log_level: str = os.getenv("LOG_LEVEL", "INFO").upper()

        # Payload limits (per request)
        self.max_document_parts: int = int(os.getenv("MAX_DOCUMENT_PARTS", "1000"))
        self.max_contract_requirements: int = int(os.getenv("MAX_CONTRACT_REQUIREMENTS", "1000"))
        self.max_pattern_length: int = int(os.getenv("MAX_PATTERN_LENGTH", "256"))

        self.enable_documents_api: bool = _env_flag("ENABLE_DOCUMENTS_API", "true")
        self.enable_audit_logging: bool = _env_flag("ENABLE_AUDIT_LOGGING", "true")


settings = AppSettings()
