"""
Request models - one variant per assistant action, discriminated on `action`.
"""
from enum import Enum
from typing import Annotated, Literal, Union

from pydantic import BaseModel, Field, TypeAdapter

from .listing import ListingDraft


class Action(str, Enum):
    SCORE_COMPLETENESS = "score_completeness"
    GENERATE_DESCRIPTION = "generate_description"
    OPTIMIZE_TITLE = "optimize_title"
    RECOMMEND_CATEGORY = "recommend_category"
    ANALYZE_PRICING = "analyze_pricing"
    EXTRACT_KEYWORDS = "extract_keywords"
    GENERATE_FEATURES = "generate_features"


class _ActionRequest(BaseModel):
    data: ListingDraft = Field(default_factory=ListingDraft)


class ScoreCompletenessRequest(_ActionRequest):
    action: Literal["score_completeness"]


class GenerateDescriptionRequest(_ActionRequest):
    action: Literal["generate_description"]


class OptimizeTitleRequest(_ActionRequest):
    action: Literal["optimize_title"]


class RecommendCategoryRequest(_ActionRequest):
    action: Literal["recommend_category"]


class AnalyzePricingRequest(_ActionRequest):
    action: Literal["analyze_pricing"]


class ExtractKeywordsRequest(_ActionRequest):
    action: Literal["extract_keywords"]


class GenerateFeaturesRequest(_ActionRequest):
    action: Literal["generate_features"]


AssistantRequest = Annotated[
    Union[
        ScoreCompletenessRequest,
        GenerateDescriptionRequest,
        OptimizeTitleRequest,
        RecommendCategoryRequest,
        AnalyzePricingRequest,
        ExtractKeywordsRequest,
        GenerateFeaturesRequest,
    ],
    Field(discriminator="action"),
]

assistant_request_adapter: TypeAdapter[AssistantRequest] = TypeAdapter(AssistantRequest)
