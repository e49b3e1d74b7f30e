from .result_types import (
    ResultType,
    BaseResult,
    VideoResult,
    ArticleResult,
    SearchResult,
    is_video,
)

__all__ = [
    'ResultType',
    'BaseResult',
    'VideoResult',
    'ArticleResult',
    'SearchResult',
    'is_video',
]
