"""Hyperlinks for rule references.

Maps known reference systems (matched case-insensitively) to a URL builder.
References from unknown systems render as plain text.
"""

from __future__ import annotations

import html
import re
from typing import Callable, Dict, Optional

from scansummary.model.report import Reference

_REDHAT_SUFFIX = re.compile(r"-[0-9]+$")
_NON_ALNUM = re.compile(r"[^a-zA-Z0-9]+")


def _redhat_errata(value: str) -> str:
    # RHSA-2015:0001-01 -> RHSA-2015-0001
    slug = _NON_ALNUM.sub("-", _REDHAT_SUFFIX.sub("", value))
    return f"http://rhn.redhat.com/errata/{slug}.html"


#: Lower-cased reference system -> URL builder.
REFERENCE_URLS: Dict[str, Callable[[str], str]] = {
    "http://cce.mitre.org": lambda v: f"http://scapsync.com/cce/{v}",
    "http://cpe.mitre.org": lambda v: (
        "http://web.nvd.nist.gov/view/cpe/search/results"
        f"?searchChoice=name&includeDeprecated=on&searchText={v}"
    ),
    "http://cve.mitre.org": lambda v: (
        f"http://web.nvd.nist.gov/view/vuln/detail?vulnId={v}"
    ),
    "http://www.cert.org": lambda v: f"http://www.cert.org/advisories/{v}.html",
    "http://www.kb.cert.org": lambda v: f"http://www.kb.cert.org/vuls/id/{v}",
    "http://www.us-cert.gov/cas/techalerts": lambda v: (
        f"http://www.us-cert.gov/ncas/alerts/{v}"
    ),
    "http://rhn.redhat.com/errata": _redhat_errata,
    "http://tools.cisco.com/security/center/content/ciscosecurityadvisory": lambda v: (
        f"http://tools.cisco.com/security/center/content/CiscoSecurityAdvisory/{v}"
    ),
    "http://iase.disa.mil/cci": lambda v: f"http://jovalcm.com/references/cci/{v}",
}


def reference_url(reference: Reference) -> Optional[str]:
    """Return the URL for ``reference``, or None for an unknown system."""
    builder = REFERENCE_URLS.get(reference.system.strip().lower())
    if builder is None:
        return None
    return builder(str(reference.value))


def reference_html(reference: Reference) -> str:
    """Render ``reference`` as an HTML fragment.

    Known systems produce ``<a href="URL" target="_blank"><nobr>VALUE</nobr></a>``;
    unknown systems produce the escaped value alone.
    """
    text = html.escape(str(reference.value))
    url = reference_url(reference)
    if url is None:
        return text
    return (
        f'<a href="{html.escape(url, quote=True)}" target="_blank">'
        f"<nobr>{text}</nobr></a>"
    )
