from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    filter_param,
    include,
    limit,
    path_id,
    rel,
    resource_id,
)

RatingLevel = Literal["NONE", "INFREQUENT_OR_MILD", "FREQUENT_OR_INTENSE"]
KidsAgeBand = Literal["FIVE_AND_UNDER", "SIX_TO_EIGHT", "NINE_TO_ELEVEN"]

# relationship name -> human label; "" clears the category
CATEGORY_SLOTS = (
    ("primaryCategory", "the primary category"),
    ("primarySubcategoryOne", "primary subcategory one"),
    ("primarySubcategoryTwo", "primary subcategory two"),
    ("secondaryCategory", "the secondary category"),
    ("secondarySubcategoryOne", "secondary subcategory one"),
    ("secondarySubcategoryTwo", "secondary subcategory two"),
)

RATED_CONTENT = (
    ("alcoholTobaccoOrDrugUseOrReferences", "Alcohol, tobacco, or drug use or references"),
    ("contests", "Contests"),
    ("gamblingSimulated", "Simulated gambling"),
    ("horrorOrFearThemes", "Horror or fear themes"),
    ("matureOrSuggestiveThemes", "Mature or suggestive themes"),
    ("medicalOrTreatmentInformation", "Medical or treatment information"),
    ("profanityOrCrudeHumor", "Profanity or crude humor"),
    ("sexualContentGraphicAndNudity", "Sexual content - graphic and nudity"),
    ("sexualContentOrNudity", "Sexual content or nudity"),
    ("violenceCartoonOrFantasy", "Cartoon or fantasy violence"),
    ("violenceRealistic", "Realistic violence"),
    (
        "violenceRealisticProlongedGraphicOrSadistic",
        "Realistic prolonged graphic or sadistic violence",
    ),
)

RATED_FLAGS = (
    ("gambling", "Real gambling"),
    ("gamblingAndContests", "Gambling and contests"),
    ("unrestrictedWebAccess", "Unrestricted web access"),
    ("seventeenPlus", "17+ rating"),
)

ENDPOINTS = (
    Endpoint(
        name="list_app_infos",
        description=(
            "List all app infos for an app. Each app info represents a "
            "version-specific set of metadata."
        ),
        method="GET",
        path="/v1/apps/{app_id}/appInfos",
        params=(
            path_id("app_id", "The App Store Connect app ID"),
            include(
                "Comma-separated includes (e.g., appInfoLocalizations,primaryCategory,secondaryCategory)"
            ),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="get_app_info",
        description="Get a specific app info by ID, optionally including localizations.",
        method="GET",
        path="/v1/appInfos/{id}",
        params=(
            path_id("id", "The app info ID"),
            include("Comma-separated includes (e.g., appInfoLocalizations)"),
        ),
    ),
    Endpoint(
        name="update_app_info",
        description=(
            "Update an app info's category relationships "
            "(primary/secondary categories and subcategories)."
        ),
        method="PATCH",
        path="/v1/appInfos/{id}",
        resource_type="appInfos",
        params=(resource_id("The app info ID"),)
        + tuple(
            rel(
                f"{slot}_id",
                slot,
                "appCategories",
                f"App category ID for {label} (empty string clears it)",
                required=False,
                nullable=True,
            )
            for slot, label in CATEGORY_SLOTS
        ),
    ),
    Endpoint(
        name="list_app_info_localizations",
        description="List all localizations for an app info (name, subtitle, privacy policy per locale).",
        method="GET",
        path="/v1/appInfos/{app_info_id}/appInfoLocalizations",
        params=(path_id("app_info_id", "The app info ID"), limit()),
        paginated=True,
    ),
    Endpoint(
        name="update_app_info_localization",
        description="Update an app info localization (name, subtitle, privacy policy URL/text).",
        method="PATCH",
        path="/v1/appInfoLocalizations/{id}",
        resource_type="appInfoLocalizations",
        params=(
            resource_id("The app info localization ID"),
            attr("name", "App name for this locale"),
            attr("subtitle", "App subtitle for this locale"),
            attr("privacyPolicyUrl", "Privacy policy URL"),
            attr("privacyChoicesUrl", "Privacy choices URL"),
            attr("privacyPolicyText", "Privacy policy text"),
        ),
    ),
    Endpoint(
        name="list_app_categories",
        description="List App Store categories, optionally filtered by platform and including subcategories.",
        method="GET",
        path="/v1/appCategories",
        params=(
            filter_param("platforms", "Filter by platforms (e.g., IOS, MAC_OS, TV_OS)"),
            include("Comma-separated includes (e.g., subcategories)"),
            limit(),
        ),
        paginated=True,
    ),
    Endpoint(
        name="list_age_rating_declarations",
        description="Get the age rating declaration for an app info.",
        method="GET",
        path="/v1/appInfos/{app_info_id}/ageRatingDeclaration",
        params=(path_id("app_info_id", "The app info ID"),),
    ),
    Endpoint(
        name="update_age_rating_declaration",
        description=(
            "Update the age rating declaration for an app. Values are NONE, "
            "INFREQUENT_OR_MILD, or FREQUENT_OR_INTENSE unless otherwise noted."
        ),
        method="PATCH",
        path="/v1/ageRatingDeclarations/{id}",
        resource_type="ageRatingDeclarations",
        params=(resource_id("The age rating declaration ID"),)
        + tuple(attr(name, label, annotation=RatingLevel) for name, label in RATED_CONTENT)
        + tuple(attr(name, label, annotation=bool) for name, label in RATED_FLAGS)
        + (
            attr(
                "kidsAgeBand",
                "Kids age band (for Made for Kids apps)",
                annotation=KidsAgeBand,
            ),
        ),
    ),
)
