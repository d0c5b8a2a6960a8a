import argparse
import sys
import json
import logging
from enum import Enum
from typing import Callable, Optional, TextIO

from smartstore_options.schemas.option_info import OptionInfo, get_product_name, get_raw_option_info
from smartstore_options.services.option_report import print_option_report
from smartstore_options.settings import Settings, settings as default_settings
from smartstore_options.smartstore_client import SmartStoreClient

logger = logging.getLogger("smartstore_options.cli")


class ReportStatus(str, Enum):
    OK = "OK"
    NO_OPTIONS = "NO_OPTIONS"
    MISSING_CREDENTIALS = "MISSING_CREDENTIALS"
    NOT_FOUND = "NOT_FOUND"
    FAILED = "FAILED"


def run_option_report(
    product_id: str,
    settings: Optional[Settings] = None,
    client_factory: Callable[[str, str], SmartStoreClient] = SmartStoreClient,
    out: Optional[TextIO] = None,
) -> ReportStatus:
    """
    채널 상품 하나의 옵션 정보를 조회하여 유형별로 출력합니다.

    1. 인증 정보 확인 (없으면 네트워크 호출 없이 종료)
    2. 채널 상품 상세 조회 (V2)
    3. originProduct.detailAttribute.optionInfo 추출
    4. 원본 구조 / 유형별 파싱 결과 / 클라이언트 내장 파싱 결과 출력
    """
    out = out or sys.stdout
    settings = settings or default_settings

    if not settings.has_naver_credentials():
        logger.error(".env 파일에 NAVER_CLIENT_ID 및 NAVER_CLIENT_SECRET이 설정되어야 합니다.")
        return ReportStatus.MISSING_CREDENTIALS

    client = client_factory(settings.naver_client_id, settings.naver_client_secret)

    print(f"🔍 상품 옵션 조회 시작 (Product ID: {product_id})", file=out)

    try:
        product_detail = client.get_channel_product_detail(product_id)
        if not product_detail:
            logger.error("상품 정보를 가져올 수 없습니다. ID가 정확한지, 판매중인 상품인지 확인해주세요.")
            return ReportStatus.NOT_FOUND

        print(f"상품명: {get_product_name(product_detail)}", file=out)

        raw_option_info = get_raw_option_info(product_detail)
        option_info = None if raw_option_info is None else OptionInfo.model_validate(raw_option_info)
        if option_info is None or option_info.is_empty():
            print_option_report(option_info, product_id, out=out)
            return ReportStatus.NO_OPTIONS

        print("\n--- [원본 옵션 데이터 구조] ---", file=out)
        print(json.dumps(raw_option_info, ensure_ascii=False, indent=2), file=out)

        print("\n--- [유형별 옵션 파싱 결과] ---", file=out)
        print_option_report(option_info, product_id, out=out)

        # 수동 파싱 결과와 비교할 수 있도록 클라이언트 내장 파서 결과도 출력
        print("\n--- [내장 메서드 파싱 결과] ---", file=out)
        parsed = client.parse_option_info(raw_option_info, product_id)
        print(json.dumps(parsed, ensure_ascii=False, indent=2), file=out)
        return ReportStatus.OK
    except Exception as e:
        logger.error(f"❌ 조회 중 오류 발생: {e}")
        return ReportStatus.FAILED


def main(argv: Optional[list[str]] = None) -> int:
    # 로그 설정
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s'
    )

    settings = default_settings

    parser = argparse.ArgumentParser(description="네이버 스마트스토어 상품 옵션 조회")
    parser.add_argument(
        "product_id",
        nargs="?",
        default=settings.naver_target_product_id,
        help="채널 상품 번호 (기본값: NAVER_TARGET_PRODUCT_ID)",
    )
    args = parser.parse_args(argv)

    status = run_option_report(args.product_id, settings=settings)
    logger.info(f"[CLI] Option report finished: {status.value}")
    # 조회 실패도 프로세스 오류로 취급하지 않음
    return 0


if __name__ == "__main__":
    sys.exit(main())
