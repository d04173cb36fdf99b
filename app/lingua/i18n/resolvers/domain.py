"""Domain-based locale resolver.

Supports:
- Full host mapping (example.de -> de, example.fr -> fr)
- Subdomain extraction (fr.example.com -> fr)
- Configurable evaluation order (full map first or subdomain first)
"""

from typing import Optional

from lingua.configuration import DomainResolverSettings, LinguaSettings
from lingua.i18n.models import LocaleContext
from lingua.i18n.resolvers.base import SingleCandidateResolver, matches_any


class DomainResolver(SingleCandidateResolver):
    def __init__(self, config: DomainResolverSettings):
        self.config = config

    @classmethod
    def from_settings(cls, settings: LinguaSettings) -> "DomainResolver":
        return cls(config=settings.resolvers.domain)

    def candidate(self, context: LocaleContext) -> Optional[str]:
        for strategy in self.config.order:
            if strategy == "full":
                locale = self.from_full_map(context.host)
            elif strategy == "subdomain":
                locale = self.from_subdomain(context.host)
            else:
                locale = None

            if locale is not None:
                return locale

        return None

    def from_full_map(self, host: str) -> Optional[str]:
        return self.config.full_map.get(host)

    def from_subdomain(self, host: str) -> Optional[str]:
        subdomain_config = self.config.subdomain
        if not subdomain_config.enabled:
            return None

        subdomain = self.extract_subdomain(host)
        if subdomain is None:
            return None

        if not self.is_allowed_base_domain(host):
            return None

        if not matches_any(subdomain, subdomain_config.patterns):
            return None

        return subdomain

    def extract_subdomain(self, host: str) -> Optional[str]:
        """Return the label at the configured 1-based position from the left.

        Hosts with fewer than three labels have no subdomain.
        """
        labels = host.split(".")
        if len(labels) < 3:
            return None

        index = self.config.subdomain.label - 1
        if index < 0 or index >= len(labels):
            return None
        return labels[index]

    def is_allowed_base_domain(self, host: str) -> bool:
        base_domains = self.config.subdomain.base_domains
        if not base_domains:
            return True
        return any(
            host == base_domain or host.endswith(f".{base_domain}")
            for base_domain in base_domains
        )
