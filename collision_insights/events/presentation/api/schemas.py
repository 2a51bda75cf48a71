from typing import List

from ...application.aggregators import format_percentage
from ...domain.entities import CamelModel
from ...domain.statistics import ObjectDetectionStats

class TypeShare(CamelModel):
    type: str
    count: int
    percentage: float  # 0-100, one decimal

class ObjectDetectionReport(ObjectDetectionStats):
    """Object statistics plus the per-type shares panels draw as bars."""
    type_breakdown: List[TypeShare] = []

    @classmethod
    def from_stats(cls, stats: ObjectDetectionStats) -> 'ObjectDetectionReport':
        ranked = sorted(stats.by_type.items(), key=lambda item: item[1], reverse=True)
        return cls(
            total_objects=stats.total_objects,
            by_type=stats.by_type,
            by_confidence=stats.by_confidence,
            type_breakdown=[
                TypeShare(type=obj_type, count=count,
                          percentage=format_percentage(count, stats.total_objects))
                for obj_type, count in ranked
            ],
        )
