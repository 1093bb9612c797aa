from clausemap.analysis.base import BaseAnalysisClient
from clausemap.analysis.example_client import ExampleAnalysisClient
from clausemap.analysis.http_client import HttpAnalysisClient
from clausemap.config.settings import Settings


class AnalysisClientFactory:
    """Creates the configured analysis service client."""

    PROVIDERS = ("http", "example")

    @classmethod
    def create(cls, settings: Settings) -> BaseAnalysisClient:
        provider = settings.analysis_provider.lower()
        if provider == "example":
            return ExampleAnalysisClient()
        if provider == "http":
            return HttpAnalysisClient(
                base_url=settings.analysis_base_url,
                timeout_seconds=settings.analysis_timeout_seconds,
            )
        raise ValueError(
            f"Unknown analysis provider '{provider}'. Choose from: {list(cls.PROVIDERS)}"
        )
