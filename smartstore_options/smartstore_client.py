import logging
import time
import requests
import base64
import bcrypt
from typing import Dict, Any, Optional, List, Union

from smartstore_options.schemas.option_info import OptionInfo, first_present
from smartstore_options.settings import settings

logger = logging.getLogger(__name__)

STANDARD_OPTION_GROUP = "표준형"


class SmartStoreClient:
    """
    네이버 커머스 API (스마트스토어) 클라이언트
    """
    def __init__(
        self,
        client_id: str,
        client_secret: str,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        self.client_id = client_id
        self.client_secret = client_secret
        self.base_url = (base_url or settings.naver_api_base_url).rstrip("/")
        self.token_url = f"{self.base_url}/v1/oauth2/token"
        self.timeout = timeout if timeout is not None else settings.naver_request_timeout

        self.access_token: Optional[str] = None
        self.expires_at: float = 0

    def _sign(self, timestamp: str) -> str:
        # {client_id}_{timestamp} 문자열을 client_secret(salt)를 사용하여 bcrypt 해싱 후 base64 인코딩
        password = f"{self.client_id}_{timestamp}"
        hashed = bcrypt.hashpw(password.encode('utf-8'), self.client_secret.encode('utf-8'))
        return base64.b64encode(hashed).decode('utf-8')

    def _get_access_token(self) -> str:
        """
        OAuth2 Access Token을 발급받거나 갱신합니다.
        """
        if self.access_token and time.time() < self.expires_at - 60:
            return self.access_token

        timestamp = str(int(time.time() * 1000))

        payload = {
            "grant_type": "client_credentials",
            "client_id": self.client_id,
            "timestamp": timestamp,
            "client_secret_sign": self._sign(timestamp),
            "type": "SELF"
        }

        try:
            response = requests.post(self.token_url, data=payload, timeout=self.timeout)
            if response.status_code != 200:
                logger.error(f"Naver token request failed ({response.status_code}): {response.text}")
                response.raise_for_status()

            data = response.json()
            self.access_token = data.get("access_token")
            expires_in = data.get("expires_in", 3600)
            self.expires_at = time.time() + expires_in

            logger.info("Successfully refreshed Naver SmartStore access token.")
            return self.access_token
        except Exception as e:
            logger.error(f"Failed to get Naver SmartStore access token: {e}")
            raise

    def _get_headers(self) -> Dict[str, str]:
        token = self._get_access_token()
        return {
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        }

    def get_channel_product_detail(self, channel_product_no: str) -> Optional[Dict[str, Any]]:
        """
        채널 상품 조회 (V2)

        상품이 없으면(404) None을 반환하고, 그 외 HTTP 오류나 네트워크 오류는 그대로 전파합니다.
        """
        url = f"{self.base_url}/v2/products/channel-products/{channel_product_no}"
        response = requests.get(url, headers=self._get_headers(), timeout=self.timeout)

        if response.status_code == 404:
            logger.warning(f"SmartStore channel product not found: {channel_product_no}")
            return None
        if response.status_code >= 400:
            logger.error(f"SmartStore get_channel_product_detail error: {response.status_code} {response.text}")
            response.raise_for_status()

        if not response.content:
            return None
        return response.json() or None

    def parse_option_info(
        self,
        option_info: Union[OptionInfo, Dict[str, Any], None],
        product_id: str,
    ) -> Dict[str, Any]:
        """
        optionInfo를 내부 옵션 형식(option_name/option_value/stock_quantity...)으로 정규화합니다.
        """
        if option_info is None:
            info = OptionInfo()
        elif isinstance(option_info, OptionInfo):
            info = option_info
        else:
            info = OptionInfo.model_validate(option_info)

        option_types: List[str] = []
        options: List[Dict[str, Any]] = []

        if info.option_simple:
            option_types.append("SIMPLE")
            for opt in info.option_simple:
                options.append(self._option_row(
                    "SIMPLE", opt.group_name, opt.name, opt.id, usable=opt.usable,
                ))

        group_names = list(info.option_combination_group_names)
        if info.option_combinations:
            option_types.append("COMBINATION")
            combined_group_name = "/".join(group_names) or None
            for combo in info.option_combinations:
                options.append(self._option_row(
                    "COMBINATION",
                    combined_group_name,
                    combo.display_name,
                    first_present(combo.id, combo.seller_manager_code),
                    stock_quantity=combo.stock_quantity,
                    price_offset=combo.price or 0,
                    usable=combo.usable,
                ))

        custom_inputs: List[Dict[str, Any]] = []
        if info.option_custom:
            option_types.append("CUSTOM")
            for custom in info.option_custom:
                custom_inputs.append({
                    "group_name": first_present(custom.group_name, custom.name),
                    "input_limit": custom.input_limit,
                })

        if info.option_standards:
            option_types.append("STANDARD")
            for std in info.option_standards:
                options.append(self._option_row(
                    "STANDARD", STANDARD_OPTION_GROUP, std.display_name, std.id,
                    stock_quantity=std.stock_quantity, usable=std.usable,
                ))

        logger.debug(f"Parsed optionInfo for {product_id}: types={option_types} options={len(options)}")

        return {
            "product_id": product_id,
            "has_options": not info.is_empty(),
            "option_types": option_types,
            "group_names": group_names,
            "options": options,
            "custom_inputs": custom_inputs,
        }

    @staticmethod
    def _option_row(
        option_type: str,
        option_name: Optional[str],
        option_value: Optional[str],
        external_option_key: Any,
        stock_quantity: Optional[int] = None,
        price_offset: int = 0,
        usable: Optional[bool] = None,
    ) -> Dict[str, Any]:
        return {
            "type": option_type,
            "option_name": option_name,
            "option_value": option_value,
            "stock_quantity": stock_quantity,
            "price_offset": price_offset,
            "external_option_key": None if external_option_key is None else str(external_option_key),
            "usable": True if usable is None else usable,
        }
