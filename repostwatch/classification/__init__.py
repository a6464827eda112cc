from repostwatch.classification.classifier import DomainClassifier, extract_domain
from repostwatch.classification.lists import DomainLists
from repostwatch.classification.models import DomainClassification, Judgment, SocialPostInfo
from repostwatch.classification.social import extract_social_info

__all__ = [
    "DomainClassification",
    "DomainClassifier",
    "DomainLists",
    "Judgment",
    "SocialPostInfo",
    "extract_domain",
    "extract_social_info",
]
