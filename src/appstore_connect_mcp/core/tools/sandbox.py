from __future__ import annotations

from appstore_connect_mcp.core.endpoints import Endpoint, attr, rel, resource_id

ENDPOINTS = (
    Endpoint(
        name="list_sandbox_testers",
        description="List sandbox testers for App Store Connect.",
        method="GET",
        path="/v2/sandboxTesters",
    ),
    Endpoint(
        name="update_sandbox_tester",
        description="Update a sandbox tester's settings.",
        method="PATCH",
        path="/v2/sandboxTesters/{id}",
        resource_type="sandboxTesters",
        params=(
            resource_id("The sandbox tester ID"),
            attr("territory", "Territory code for the sandbox tester (e.g., USA, GBR)"),
            attr(
                "interruptPurchases",
                "Whether to interrupt purchases for testing",
                annotation=bool,
            ),
            attr("subscriptionRenewalRate", "Subscription renewal rate for testing"),
        ),
    ),
    Endpoint(
        name="clear_sandbox_tester_purchase_history",
        description="Clear purchase history for one or more sandbox testers.",
        method="POST",
        path="/v2/sandboxTestersClearPurchaseHistoryRequest",
        resource_type="sandboxTestersClearPurchaseHistoryRequest",
        params=(
            rel(
                "tester_ids",
                "sandboxTesters",
                "sandboxTesters",
                "Sandbox tester IDs to clear purchase history for",
                to_many=True,
            ),
        ),
    ),
)
