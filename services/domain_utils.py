from __future__ import annotations

import re
import unicodedata
from typing import Optional
from urllib.parse import unquote, urlparse

import tldextract


# Bundled public-suffix snapshot only; never fetch the list over the network.
_EXTRACT = tldextract.TLDExtract(suffix_list_urls=())

_USERNAME_RE = re.compile(r"linkedin\.com/in/([^/?#]+)", re.IGNORECASE)


def extract_apex_domain(url_or_domain: Optional[str]) -> Optional[str]:
    if not url_or_domain:
        return None
    try:
        text = str(url_or_domain).strip().lower()
        if not text.startswith('http://') and not text.startswith('https://'):
            text = f"http://{text}"
        ext = _EXTRACT(text)
        if ext.domain and ext.suffix:
            return f"{ext.domain}.{ext.suffix}"
        return None
    except Exception:
        return None


def source_domain(url: Optional[str]) -> str:
    """Hostname without a leading www., as shown in provenance notes."""
    if not url:
        return ""
    try:
        host = (urlparse(url).hostname or "").lower()
    except ValueError:
        return ""
    return host[4:] if host.startswith("www.") else host


def normalize_linkedin_path(url: Optional[str]) -> str:
    """Lowercased URL path without trailing slash, e.g. '/in/jane-doe'.

    Used as the lookup key for stored contacts. Unparsable input is returned
    lowercased as-is.
    """
    if not url:
        return ""
    text = str(url).strip()
    if not text.startswith("http"):
        text = "https://" + text
    try:
        path = urlparse(text).path or ""
    except ValueError:
        return str(url).strip().lower()
    if path.endswith("/"):
        path = path[:-1]
    return path.lower()


def extract_linkedin_username(url: Optional[str]) -> str:
    if not url:
        return ""
    m = _USERNAME_RE.search(str(url))
    return m.group(1).lower() if m else ""


def normalize_linkedin_profile_url(url: Optional[str]) -> Optional[str]:
    if not url:
        return None
    try:
        u = urlparse(url)
        host = (u.netloc or '').lower().replace('www.', '').replace('de.linkedin.com', 'linkedin.com')
        path = (u.path or '').rstrip('/')
        if not host:
            return None
        if 'linkedin.com' not in host or not path.startswith('/in/'):
            return None
        # Keep only /in/{slug} and drop trailing locale/segments (e.g., /de, /en)
        parts = [p for p in path.split('/') if p]
        if len(parts) >= 2 and parts[0] == 'in':
            slug = unquote(parts[1])
            slug = unicodedata.normalize('NFKC', slug).strip().lower()
            # Remove invisible characters occasionally present
            slug = slug.replace('\u200b', '').replace('\u200c', '').replace('\u200d', '')
            return f"https://linkedin.com/in/{slug}"
        return f"https://linkedin.com{path}"
    except Exception:
        return None
