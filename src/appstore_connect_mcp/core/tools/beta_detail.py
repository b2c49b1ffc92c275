"""TestFlight metadata: app and build localizations, beta review submission and details."""

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
LOCALE = "Locale code (e.g., en-US, fr-FR)"


def _beta_app_text(description: str):
    return (
        attr("description", description),
        attr("feedbackEmail", "Feedback email address"),
        attr("marketingUrl", "Marketing URL"),
        attr("privacyPolicyUrl", "Privacy policy URL"),
        attr("tvOsPrivacyPolicy", "tvOS privacy policy text"),
    )


ENDPOINTS = (
    Endpoint(
        name="list_beta_app_localizations",
        description="List TestFlight app-level localizations (descriptions per locale) for an app.",
        method="GET",
        path="/v1/apps/{app_id}/betaAppLocalizations",
        params=(path_id("app_id", APP_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_beta_app_localization",
        description=(
            "Create a TestFlight app-level localization for a specific locale. "
            "Sets description, feedback email, and URLs."
        ),
        method="POST",
        path="/v1/betaAppLocalizations",
        resource_type="betaAppLocalizations",
        params=(
            rel("app_id", "app", "apps", APP_ID),
            attr("locale", LOCALE, required=True),
        )
        + _beta_app_text("TestFlight app description for this locale"),
    ),
    Endpoint(
        name="update_beta_app_localization",
        description=(
            "Update a TestFlight app-level localization. "
            "Change description, feedback email, or URLs."
        ),
        method="PATCH",
        path="/v1/betaAppLocalizations/{id}",
        resource_type="betaAppLocalizations",
        params=(resource_id("The beta app localization ID"),)
        + _beta_app_text("TestFlight app description"),
    ),
    Endpoint(
        name="list_beta_build_localizations",
        description="List TestFlight build-level localizations ('What to Test' per locale) for a build.",
        method="GET",
        path="/v1/builds/{build_id}/betaBuildLocalizations",
        params=(path_id("build_id", "The build ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_beta_build_localization",
        description="Create a TestFlight build-level localization ('What to Test') for a specific locale.",
        method="POST",
        path="/v1/betaBuildLocalizations",
        resource_type="betaBuildLocalizations",
        params=(
            rel("build_id", "build", "builds", "The build ID"),
            attr("locale", LOCALE, required=True),
            attr("whatsNew", "What to test text for this build"),
        ),
    ),
    Endpoint(
        name="update_beta_build_localization",
        description="Update a TestFlight build-level localization. Change the 'What to Test' text.",
        method="PATCH",
        path="/v1/betaBuildLocalizations/{id}",
        resource_type="betaBuildLocalizations",
        params=(
            resource_id("The beta build localization ID"),
            attr("whatsNew", "What to test text for this build"),
        ),
    ),
    Endpoint(
        name="submit_build_for_beta_review",
        description="Submit a build for TestFlight beta review.",
        method="POST",
        path="/v1/betaAppReviewSubmissions",
        resource_type="betaAppReviewSubmissions",
        params=(rel("build_id", "build", "builds", "The build ID to submit for beta review"),),
    ),
    Endpoint(
        name="get_beta_app_review_detail",
        description="Get the beta app review detail (contact info and demo account) for an app.",
        method="GET",
        path="/v1/apps/{app_id}/betaAppReviewDetail",
        params=(path_id("app_id", APP_ID),),
    ),
    Endpoint(
        name="update_beta_app_review_detail",
        description="Update the beta app review detail (contact info and demo account credentials).",
        method="PATCH",
        path="/v1/betaAppReviewDetails/{id}",
        resource_type="betaAppReviewDetails",
        params=(
            resource_id("The beta app review detail ID"),
            attr("contactFirstName", "Contact first name"),
            attr("contactLastName", "Contact last name"),
            attr("contactPhone", "Contact phone number"),
            attr("contactEmail", "Contact email address"),
            attr("demoAccountName", "Demo account username"),
            attr("demoAccountPassword", "Demo account password"),
            attr("demoAccountRequired", "Whether a demo account is required", annotation=bool),
            attr("notes", "Additional notes for the reviewer"),
        ),
    ),
)
