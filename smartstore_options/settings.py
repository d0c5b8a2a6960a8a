from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # 네이버 커머스 API 인증 정보 (.env: NAVER_CLIENT_ID, NAVER_CLIENT_SECRET)
    naver_client_id: str = ""
    naver_client_secret: str = ""

    naver_api_base_url: str = "https://api.commerce.naver.com/external"
    naver_request_timeout: float = 15.0 # 요청 타임아웃 (초)

    # 예제 실행 시 조회할 채널 상품 번호
    naver_target_product_id: str = "1234567890"

    def has_naver_credentials(self) -> bool:
        """클라이언트 ID/시크릿이 모두 설정되어 있는지 확인"""
        return bool(self.naver_client_id.strip() and self.naver_client_secret.strip())

    @field_validator("naver_api_base_url")
    @classmethod
    def validate_http_url(cls, v: str) -> str:
        if not v.startswith(("http://", "https://")):
            raise ValueError("URL은 'http://' 또는 'https://'로 시작해야 합니다.")
        return v.rstrip("/")

    @field_validator("naver_request_timeout")
    @classmethod
    def validate_timeout(cls, v: float) -> float:
        if v <= 0:
            raise ValueError("타임아웃은 0보다 커야 합니다.")
        return v

    model_config = SettingsConfigDict(env_file=".env", extra="ignore", case_sensitive=False)


settings = Settings()
