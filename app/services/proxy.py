from typing import Optional
from loguru import logger

from app.core.constants import ProxyLogConfig
from app.models.proxy import ProxyConfig


class ProxyService:
    def __init__(self, proxy_url: Optional[str] = None):
        """
        Initialize the ProxyService.

        Args:
            proxy_url: Proxy for all provider traffic, or None for a direct connection.
        """
        self.proxy_url = proxy_url.strip() if proxy_url and proxy_url.strip() else None

    @property
    def has_proxy(self) -> bool:
        return self.proxy_url is not None

    def get_proxies(self) -> Optional[ProxyConfig]:
        """
        Builds the proxy configuration handed to the transcript provider.
        The same URL is used for both HTTP and HTTPS traffic.
        Returns None when no proxy is configured.
        """
        logger.info(f"Proxy configured: {self.has_proxy}")
        if not self.has_proxy:
            return None

        preview = self.proxy_url[: ProxyLogConfig.PREVIEW_CHARS]
        ellipsis = "..." if len(self.proxy_url) > ProxyLogConfig.ELLIPSIS_AFTER_CHARS else ""
        logger.info(f"Using proxy: {preview}{ellipsis}")

        return ProxyConfig(http=self.proxy_url, https=self.proxy_url)
