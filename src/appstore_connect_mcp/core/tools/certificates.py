from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    filter_param,
    include,
    limit,
    path_id,
    rel,
)

CERTIFICATE_TYPES = (
    "IOS_DEVELOPMENT, IOS_DISTRIBUTION, MAC_APP_DEVELOPMENT, "
    "MAC_APP_DISTRIBUTION, DEVELOPER_ID_APPLICATION"
)
PROFILE_TYPES = "IOS_APP_DEVELOPMENT, IOS_APP_STORE, MAC_APP_DEVELOPMENT, MAC_APP_STORE"

ENDPOINTS = (
    Endpoint(
        name="list_certificates",
        description="List signing certificates. Filter by type, display name, or serial number.",
        method="GET",
        path="/v1/certificates",
        params=(
            filter_param("certificateType", f"Filter by certificate type (e.g., {CERTIFICATE_TYPES})"),
            filter_param("displayName", "Filter by display name"),
            filter_param("serialNumber", "Filter by serial number"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_certificate",
        description="Get details for a specific signing certificate.",
        method="GET",
        path="/v1/certificates/{id}",
        params=(path_id("id", "The certificate ID"),),
    ),
    Endpoint(
        name="create_certificate",
        description="Create a new signing certificate from a CSR.",
        method="POST",
        path="/v1/certificates",
        resource_type="certificates",
        params=(
            attr("certificateType", f"Certificate type (e.g., {CERTIFICATE_TYPES})", required=True),
            attr(
                "csrContent",
                "The certificate signing request (CSR) content in PEM format",
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="revoke_certificate",
        description="Revoke (delete) a signing certificate.",
        method="DELETE",
        path="/v1/certificates/{id}",
        params=(path_id("id", "The certificate ID to revoke"),),
        ack="Revoked certificate {id}",
    ),
    Endpoint(
        name="list_profiles",
        description="List provisioning profiles. Filter by name, type, or state.",
        method="GET",
        path="/v1/profiles",
        params=(
            filter_param("name", "Filter by profile name"),
            filter_param("profileType", f"Filter by profile type (e.g., {PROFILE_TYPES})"),
            filter_param("profileState", "Filter by profile state (e.g., ACTIVE, INVALID)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_profile",
        description=(
            "Get details for a specific provisioning profile, optionally including "
            "related resources."
        ),
        method="GET",
        path="/v1/profiles/{id}",
        params=(
            path_id("id", "The profile ID"),
            include("Comma-separated includes (e.g., bundleId,certificates,devices)"),
        ),
    ),
    Endpoint(
        name="create_profile",
        description="Create a new provisioning profile.",
        method="POST",
        path="/v1/profiles",
        resource_type="profiles",
        params=(
            attr("name", "Profile name", required=True),
            attr("profileType", f"Profile type (e.g., {PROFILE_TYPES})", required=True),
            rel("bundleId_id", "bundleId", "bundleIds", "The bundle ID resource ID"),
            rel(
                "certificate_ids",
                "certificates",
                "certificates",
                "Certificate IDs to include in the profile",
                to_many=True,
            ),
            rel(
                "device_ids",
                "devices",
                "devices",
                "Device IDs to include (required for development profiles)",
                required=False,
                to_many=True,
            ),
        ),
    ),
    Endpoint(
        name="delete_profile",
        description="Delete a provisioning profile.",
        method="DELETE",
        path="/v1/profiles/{id}",
        params=(path_id("id", "The profile ID to delete"),),
        ack="Deleted profile {id}",
    ),
)
