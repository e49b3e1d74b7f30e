from enum import Enum
from typing import Annotated, Optional, Union, Literal
from pydantic import BaseModel, Field


class ResultType(str, Enum):
    VIDEO = "video"
    ARTICLE = "article"


class BaseResult(BaseModel):
    title: str
    link: str
    thumbnail: Optional[str] = None

    class Config:
        frozen = True
        extra = "forbid"


class VideoResult(BaseResult):
    views: int = Field(default=0, ge=0)
    likes: int = Field(default=0, ge=0)
    type: Literal["video"] = ResultType.VIDEO.value


class ArticleResult(BaseResult):
    snippet: str = ""
    type: Literal["article"] = ResultType.ARTICLE.value


SearchResult = Annotated[
    Union[VideoResult, ArticleResult], Field(discriminator="type")
]


def is_video(result: BaseResult) -> bool:
    return result.type == ResultType.VIDEO.value
