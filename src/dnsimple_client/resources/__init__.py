"""Resource groups exposed on ``DNSimpleClient``.

Paginated list methods (``list_domains``, ``list_zones``,
``list_zone_records``, ...) take the parameter bag as their last positional
argument, so they can be handed to ``dnsimple_client.pagination.iterate_all``
and ``collect_all`` as-is.
"""

from dnsimple_client.resources.accounts import Accounts
from dnsimple_client.resources.base import Resource
from dnsimple_client.resources.billing import Billing
from dnsimple_client.resources.certificates import Certificates
from dnsimple_client.resources.contacts import Contacts
from dnsimple_client.resources.domains import Domains
from dnsimple_client.resources.identity import Identity
from dnsimple_client.resources.oauth import OAuth
from dnsimple_client.resources.registrar import Registrar
from dnsimple_client.resources.tlds import Tlds
from dnsimple_client.resources.webhooks import Webhooks
from dnsimple_client.resources.zones import Zones

__all__ = [
    "Accounts",
    "Billing",
    "Certificates",
    "Contacts",
    "Domains",
    "Identity",
    "OAuth",
    "Registrar",
    "Resource",
    "Tlds",
    "Webhooks",
    "Zones",
]
