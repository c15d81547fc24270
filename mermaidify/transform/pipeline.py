"""TransformPipeline — runs ordered transforms on rendered HTML output."""

from abc import ABC, abstractmethod


class Transform(ABC):
    @abstractmethod
    def apply(self, content: str) -> str:
        """Transform rendered HTML content."""
        ...


class TransformPipeline:
    def __init__(self, transforms: list[Transform]):
        self.transforms = transforms

    def apply(self, content: str) -> str:
        for t in self.transforms:
            content = t.apply(content)
        return content
