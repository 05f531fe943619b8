"""SDK settings loaded from environment variables."""

from pydantic_settings import BaseSettings, SettingsConfigDict

JWT_TTL_DEFAULT = 900
SIGNATURE_METHOD_DEFAULT = "md5hash"


class VonageSettings(BaseSettings):
    """Credentials and signing options for the Vonage APIs."""

    model_config = SettingsConfigDict(env_prefix="VONAGE_")

    api_key: str = ""
    api_secret: str = ""
    signature_secret: str = ""
    signature_method: str = SIGNATURE_METHOD_DEFAULT
    application_id: str = ""
    private_key_path: str = ""
    jwt_ttl: int = JWT_TTL_DEFAULT
    jwt_acl_paths: str = ""

    def get_acl_path_list(self) -> list[str]:
        """Parse comma-separated JWT ACL paths."""
        if not self.jwt_acl_paths:
            return []
        return [p.strip() for p in self.jwt_acl_paths.split(",") if p.strip()]
