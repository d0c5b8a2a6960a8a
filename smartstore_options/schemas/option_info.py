from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, List, Optional, Union


def first_present(*values: Any) -> Any:
    """
    순서대로 값을 확인하여 처음으로 존재하는 값을 반환합니다.
    None과 빈 문자열은 값이 없는 것으로 간주합니다 (동의어 필드 fallback 용).
    """
    for value in values:
        if value is None:
            continue
        if isinstance(value, str) and value == "":
            continue
        return value
    return None


class _UpstreamModel(BaseModel):
    # 네이버 응답의 알 수 없는 필드는 그대로 보존, 숫자 옵션값(예: 사이즈 250)은 문자열로 변환
    model_config = ConfigDict(populate_by_name=True, extra="allow", coerce_numbers_to_str=True)


class OptionSimple(_UpstreamModel):
    """단독형 옵션"""
    id: Optional[Union[int, str]] = None
    group_name: Optional[str] = Field(default=None, alias="groupName")
    name: Optional[str] = None
    usable: Optional[bool] = None


class OptionCombination(_UpstreamModel):
    """조합형 옵션 (옵션값 조합별 재고/가격)"""
    id: Optional[Union[int, str]] = None
    option_name: Optional[str] = Field(default=None, alias="optionName")
    option_name1: Optional[str] = Field(default=None, alias="optionName1")
    option_name2: Optional[str] = Field(default=None, alias="optionName2")
    option_name3: Optional[str] = Field(default=None, alias="optionName3")
    option_name4: Optional[str] = Field(default=None, alias="optionName4")
    stock_quantity: Optional[int] = Field(default=None, alias="stockQuantity")
    price: Optional[int] = None
    seller_manager_code: Optional[str] = Field(default=None, alias="sellerManagerCode")
    usable: Optional[bool] = None

    @property
    def option_values(self) -> List[str]:
        values = [self.option_name1, self.option_name2, self.option_name3, self.option_name4]
        return [v for v in values if v]

    @property
    def display_name(self) -> Optional[str]:
        # optionName이 없으면 optionName1~4를 '/'로 연결
        joined = "/".join(self.option_values) or None
        return first_present(self.option_name, joined)


class OptionCustom(_UpstreamModel):
    """직접 입력형 옵션"""
    id: Optional[Union[int, str]] = None
    group_name: Optional[str] = Field(default=None, alias="groupName")
    name: Optional[str] = None
    input_limit: Optional[int] = Field(default=None, alias="inputLimit")
    usable: Optional[bool] = None


class OptionStandard(_UpstreamModel):
    """표준형(색상/사이즈) 옵션"""
    id: Optional[Union[int, str]] = None
    option_name: Optional[str] = Field(default=None, alias="optionName")
    standard_option_name: Optional[str] = Field(default=None, alias="standardOptionName")
    stock_quantity: Optional[int] = Field(default=None, alias="stockQuantity")
    usable: Optional[bool] = None

    @property
    def display_name(self) -> Optional[str]:
        return first_present(self.option_name, self.standard_option_name)


class OptionInfo(_UpstreamModel):
    """
    originProduct.detailAttribute.optionInfo

    네 가지 옵션 유형은 각각 독립적으로 생략될 수 있으며,
    누락/null/빈 배열은 모두 빈 리스트로 정규화합니다.
    """
    option_simple: List[OptionSimple] = Field(default_factory=list, alias="optionSimple")
    option_combinations: List[OptionCombination] = Field(default_factory=list, alias="optionCombinations")
    option_combination_group_names: List[str] = Field(default_factory=list, alias="optionCombinationGroupNames")
    option_custom: List[OptionCustom] = Field(default_factory=list, alias="optionCustom")
    option_standards: List[OptionStandard] = Field(default_factory=list, alias="optionStandards")

    @field_validator("option_simple", "option_combinations", "option_custom", "option_standards", mode="before")
    @classmethod
    def null_to_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @field_validator("option_combination_group_names", mode="before")
    @classmethod
    def normalize_group_names(cls, v: Any) -> Any:
        # 등록 API 형식 {"optionGroupName1": "색상", "optionGroupName2": "사이즈"} 도 허용
        if v is None:
            return []
        if isinstance(v, dict):
            keys = sorted(k for k in v if k.startswith("optionGroupName"))
            return [v[k] for k in keys if v[k]]
        if isinstance(v, (list, tuple)):
            return [name for name in v if name]
        return v

    def is_empty(self) -> bool:
        """설정된 옵션이 하나도 없는 단품 상품인지 여부"""
        return not (
            self.option_simple
            or self.option_combinations
            or self.option_custom
            or self.option_standards
        )


def get_raw_option_info(product_detail: Optional[dict]) -> Optional[Any]:
    """
    채널 상품 상세 응답에서 originProduct.detailAttribute.optionInfo 원본을 꺼냅니다.
    경로 중간이 비어 있으면 None을 반환합니다.
    """
    if not isinstance(product_detail, dict):
        return None

    origin_product = product_detail.get("originProduct")
    if not isinstance(origin_product, dict):
        return None

    detail_attribute = origin_product.get("detailAttribute")
    if not isinstance(detail_attribute, dict):
        return None

    return detail_attribute.get("optionInfo")


def extract_option_info(product_detail: Optional[dict]) -> Optional[OptionInfo]:
    raw_option_info = get_raw_option_info(product_detail)
    if raw_option_info is None:
        return None
    return OptionInfo.model_validate(raw_option_info)


def get_product_name(product_detail: dict) -> Optional[str]:
    origin_product = product_detail.get("originProduct")
    origin_name = origin_product.get("name") if isinstance(origin_product, dict) else None
    return first_present(product_detail.get("name"), origin_name)
