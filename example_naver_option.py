"""
네이버 커머스 API - 상품 옵션 조회 예제

채널 상품 조회 API(V2)로 상세 정보를 가져온 뒤
originProduct.detailAttribute.optionInfo 필드를 유형별로 출력합니다.

    python example_naver_option.py [채널상품번호]
"""
import sys

from smartstore_options.cli import main

if __name__ == "__main__":
    sys.exit(main())
