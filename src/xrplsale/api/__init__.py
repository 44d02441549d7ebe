"""
API Package

HTTP facade over the XRPL.Sale REST API.
"""

from .client import (
    AnalyticsApi,
    ApiClient,
    AuthApi,
    InvestmentsApi,
    ProjectsApi,
    WebhooksApi,
)

__all__ = [
    "AnalyticsApi",
    "ApiClient",
    "AuthApi",
    "InvestmentsApi",
    "ProjectsApi",
    "WebhooksApi",
]
