from toolbelt.core.services.ip.service import IP_LOOKUP_COLLECTION, IpLookupService, get_ip_lookup

__all__ = ['IP_LOOKUP_COLLECTION', 'IpLookupService', 'get_ip_lookup']
