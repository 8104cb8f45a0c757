"""Built-in entity type names accepted in transformation keys."""

from __future__ import annotations

DEFAULT_ENTITY_TYPES: tuple[str, ...] = (
    "Account",
    "AutnumRecord",
    "AutonomousSystem",
    "ContactRecord",
    "DomainRecord",
    "EmailAddress",
    "File",
    "Fingerprint",
    "FQDN",
    "FundsTransfer",
    "Identifier",
    "IPAddress",
    "IPNetRecord",
    "Location",
    "Netblock",
    "Organization",
    "Person",
    "Phone",
    "Product",
    "ProductRelease",
    "Registrant",
    "RIROrg",
    "Service",
    "SocketAddress",
    "TLS",
    "TLSCertificate",
    "URL",
)
