from functools import cmp_to_key
from typing import Iterable, List
from ..models import SearchResult, is_video


def compare_results(a: SearchResult, b: SearchResult) -> int:
    """Order videos by views then likes, both descending.

    Any pair involving an article compares equal.
    """
    if is_video(a) and is_video(b):
        return (b.views - a.views) or (b.likes - a.likes)
    return 0


def rank_results(results: Iterable[SearchResult]) -> List[SearchResult]:
    """Return a new ranked list.

    Videos are stably sorted with compare_results into the positions videos
    already occupy; articles keep their positions. For the usual input of
    videos followed by articles this is exactly a stable sort with
    compare_results, and any two videos always end up in comparator order.
    """
    ranked = list(results)
    slots = [index for index, result in enumerate(ranked) if is_video(result)]
    videos = sorted((ranked[index] for index in slots), key=cmp_to_key(compare_results))
    for index, result in zip(slots, videos):
        ranked[index] = result
    return ranked
