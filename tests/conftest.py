"""Pytest configuration and fixtures."""

import pytest


@pytest.fixture
def option_info_payload() -> dict:
    """네 가지 옵션 유형이 모두 포함된 optionInfo 응답 예시."""
    return {
        "optionSimple": [
            {"id": 101, "groupName": "색상", "name": "블랙", "usable": True},
            {"id": 102, "groupName": "색상", "name": "화이트", "usable": True},
        ],
        "optionCombinationGroupNames": {
            "optionGroupName1": "색상",
            "optionGroupName2": "사이즈",
        },
        "optionCombinations": [
            {
                "id": 2001,
                "optionName1": "블랙",
                "optionName2": "L",
                "stockQuantity": 10,
                "price": 0,
                "sellerManagerCode": "B-L",
                "usable": True,
            },
            {
                "id": 2002,
                "optionName1": "블랙",
                "optionName2": "XL",
                "stockQuantity": 5,
                "price": 1000,
                "sellerManagerCode": "B-XL",
                "usable": True,
            },
        ],
        "optionCustom": [
            {"id": 301, "groupName": "각인 문구", "inputLimit": 20},
        ],
        "optionStandards": [
            {"id": 401, "optionName": "레드"},
            {"id": 402, "standardOptionName": "블루"},
        ],
        "useStockManagement": True,
    }


@pytest.fixture
def product_detail_factory():
    """채널 상품 상세 응답 생성기."""
    def _make(option_info=None, name="기능성 티셔츠"):
        detail_attribute = {}
        if option_info is not None:
            detail_attribute["optionInfo"] = option_info
        return {
            "originProduct": {
                "name": name,
                "salePrice": 15000,
                "detailAttribute": detail_attribute,
            },
            "smartstoreChannelProduct": {"channelProductName": name},
        }
    return _make


# 테스트 마커 정의
def pytest_configure(config):
    """Pytest 마커 등록."""
    config.addinivalue_line("markers", "unit: 단위 테스트 (네트워크 불필요)")
    config.addinivalue_line("markers", "integration: 통합 테스트 (실제 API 필요)")
