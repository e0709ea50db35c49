"""
Utilities Package

Contents:
=========
- slug: SlugNormalizer, SlugUniquenessResolver
- seo: SEOMetaDeriver
- security: admin JWT helpers

Usage:
======
    from athenaeum.shared.utils import SlugNormalizer, SEOMetaDeriver
"""

from athenaeum.shared.utils.slug import SlugNormalizer, SlugUniquenessResolver, SlugCandidate
from athenaeum.shared.utils.seo import SEOMetaDeriver, truncate_at_word
from athenaeum.shared.utils.security import SecurityUtils

__all__ = [
    "SlugNormalizer",
    "SlugUniquenessResolver",
    "SlugCandidate",
    "SEOMetaDeriver",
    "truncate_at_word",
    "SecurityUtils",
]
