"""Resource namespaces for the VirusTotal client."""

from .domains import Domains
from .files import Files
from .ip_addresses import IPAddresses
from .urls import URLs, url_id

__all__ = [
    "Domains",
    "Files",
    "IPAddresses",
    "URLs",
    "url_id",
]
