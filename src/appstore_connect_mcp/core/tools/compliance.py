from __future__ import annotations

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
    resource_id,
)

APP_ID = "The App Store Connect app ID"

ENDPOINTS = (
    Endpoint(
        name="list_app_encryption_declarations",
        description="List app encryption declarations for an app.",
        method="GET",
        path="/v1/apps/{app_id}/appEncryptionDeclarations",
        params=(path_id("app_id", APP_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_app_encryption_declaration",
        description="Create an app encryption declaration for an app.",
        method="POST",
        path="/v1/appEncryptionDeclarations",
        resource_type="appEncryptionDeclarations",
        params=(
            rel("app_id", "app", "apps", APP_ID),
            attr(
                "availableOnFrenchStore",
                "Whether the app is available on the French App Store",
                annotation=bool,
                required=True,
            ),
            attr("codeValue", "The encryption code value"),
            attr(
                "containsProprietaryCryptography",
                "Whether the app contains proprietary cryptography",
                annotation=bool,
                required=True,
            ),
            attr(
                "containsThirdPartyCryptography",
                "Whether the app contains third-party cryptography",
                annotation=bool,
                required=True,
            ),
            attr("platform", "The platform (e.g., IOS, MAC_OS)", required=True),
            attr("usesEncryption", "Whether the app uses encryption", annotation=bool, required=True),
            attr(
                "isExempt",
                "Whether the app is exempt from encryption regulations",
                annotation=bool,
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="get_app_encryption_declaration",
        description="Get details of a specific app encryption declaration.",
        method="GET",
        path="/v1/appEncryptionDeclarations/{id}",
        params=(path_id("id", "The app encryption declaration ID"),),
    ),
    Endpoint(
        name="list_eulas",
        description="Get the end user license agreement for an app.",
        method="GET",
        path="/v1/apps/{app_id}/endUserLicenseAgreement",
        params=(path_id("app_id", APP_ID),),
    ),
    Endpoint(
        name="create_eula",
        description="Create an end user license agreement for an app.",
        method="POST",
        path="/v1/endUserLicenseAgreements",
        resource_type="endUserLicenseAgreements",
        params=(
            rel("app_id", "app", "apps", APP_ID),
            attr("agreementText", "The EULA agreement text", required=True),
            rel(
                "territory_ids",
                "territories",
                "territories",
                "Territory IDs this EULA applies to",
                required=False,
                to_many=True,
            ),
        ),
    ),
    Endpoint(
        name="update_eula",
        description="Update an end user license agreement.",
        method="PATCH",
        path="/v1/endUserLicenseAgreements/{id}",
        resource_type="endUserLicenseAgreements",
        params=(
            resource_id("The EULA ID"),
            attr("agreementText", "Updated EULA agreement text"),
        ),
    ),
    Endpoint(
        name="delete_eula",
        description="Delete an end user license agreement.",
        method="DELETE",
        path="/v1/endUserLicenseAgreements/{id}",
        params=(path_id("id", "The EULA ID to delete"),),
        ack="Deleted end user license agreement {id}",
    ),
)
