"""
스마트스토어 옵션 정보 리포트.

optionInfo의 네 가지 옵션 유형(단독형/조합형/직접 입력형/표준형)을
사람이 읽을 수 있는 텍스트로 정리합니다. 섹션 순서는 고정이며,
비어 있는 유형은 출력하지 않습니다.
"""

import sys
import logging
from typing import Callable, List, Optional, TextIO

from smartstore_options.schemas.option_info import OptionInfo

logger = logging.getLogger(__name__)

NO_OPTIONS_NOTICE = "ℹ️ 이 상품은 설정된 옵션이 없는 단품 상품입니다."


def _simple_section(info: OptionInfo) -> List[str]:
    if not info.option_simple:
        return []
    lines = ["[단독형 옵션]"]
    for opt in info.option_simple:
        lines.append(f"  - {opt.group_name}: {opt.name} (ID: {opt.id})")
    return lines


def _combination_section(info: OptionInfo) -> List[str]:
    if not info.option_combinations:
        return []
    lines = ["[조합형 옵션]"]
    # 옵션 항목명은 조합 개수와 무관하게 한 번만 출력
    lines.append(f"  - 옵션 항목명: {', '.join(info.option_combination_group_names)}")
    for combo in info.option_combinations:
        lines.append(f"  - 조합: {combo.display_name} (ID: {combo.id}, 재고: {combo.stock_quantity}개)")
    return lines


def _custom_section(info: OptionInfo) -> List[str]:
    if not info.option_custom:
        return []
    lines = ["[직접 입력형 옵션]"]
    for custom in info.option_custom:
        lines.append(f"  - {custom.group_name} (글자수 제한: {custom.input_limit}자)")
    return lines


def _standard_section(info: OptionInfo) -> List[str]:
    if not info.option_standards:
        return []
    lines = ["[표준형 옵션]"]
    for std in info.option_standards:
        lines.append(f"  - {std.display_name} (ID: {std.id})")
    return lines


_SECTIONS: tuple[Callable[[OptionInfo], List[str]], ...] = (
    _simple_section,
    _combination_section,
    _custom_section,
    _standard_section,
)


def format_option_info(option_info: Optional[OptionInfo], product_id: str) -> List[str]:
    """옵션 정보를 유형별 섹션 라인 목록으로 변환"""
    if option_info is None or option_info.is_empty():
        logger.debug(f"No configurable options for product {product_id}")
        return [NO_OPTIONS_NOTICE]

    lines: List[str] = []
    for section in _SECTIONS:
        lines.extend(section(option_info))
    return lines


def print_option_report(
    option_info: Optional[OptionInfo],
    product_id: str,
    out: Optional[TextIO] = None,
) -> None:
    out = out or sys.stdout
    for line in format_option_info(option_info, product_id):
        print(line, file=out)
