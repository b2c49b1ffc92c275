from __future__ import annotations

from typing import Literal

from appstore_connect_mcp.core.endpoints import (
    Endpoint,
    attr,
    limit,
    path_id,
    rel,
    resource_id,
)

DETAIL_ID = "The Game Center detail ID"

ScoreFormatter = Literal[
    "INTEGER",
    "DECIMAL_POINT_1",
    "DECIMAL_POINT_2",
    "DECIMAL_POINT_3",
    "ELAPSED_TIME",
    "MONEY",
]
SubmissionType = Literal["BEST_SCORE", "MOST_RECENT_SCORE"]
ScoreSortType = Literal["ASC", "DESC"]

DETAIL_INCLUDE = (
    "gameCenterAppVersions,gameCenterGroup,gameCenterLeaderboards,"
    "gameCenterLeaderboardSets,gameCenterAchievements"
)


def _detail(what: str):
    return rel(
        "detail_id",
        "gameCenterDetail",
        "gameCenterDetails",
        f"The Game Center detail ID to associate this {what} with",
    )


LEADERBOARD_ENDPOINTS = (
    Endpoint(
        name="get_game_center_detail",
        description=(
            "Get Game Center detail for an app, including leaderboards, achievements, "
            "leaderboard sets, and groups."
        ),
        method="GET",
        path="/v1/apps/{app_id}/gameCenterDetail",
        params=(path_id("app_id", "The App Store Connect app ID"),),
        fixed_query={"include": DETAIL_INCLUDE},
    ),
    Endpoint(
        name="list_game_center_leaderboards",
        description="List Game Center leaderboards for a Game Center detail.",
        method="GET",
        path="/v1/gameCenterDetails/{detail_id}/gameCenterLeaderboards",
        params=(path_id("detail_id", DETAIL_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_game_center_leaderboard",
        description="Create a new Game Center leaderboard.",
        method="POST",
        path="/v1/gameCenterLeaderboards",
        resource_type="gameCenterLeaderboards",
        params=(
            _detail("leaderboard"),
            attr(
                "defaultFormatter",
                "The default formatter for leaderboard scores",
                annotation=ScoreFormatter,
                required=True,
            ),
            attr("referenceName", "A reference name for the leaderboard", required=True),
            attr(
                "vendorIdentifier",
                "A unique vendor identifier for the leaderboard",
                required=True,
            ),
            attr(
                "submissionType",
                "How scores are submitted",
                annotation=SubmissionType,
                required=True,
            ),
            attr(
                "scoreSortType",
                "Sort order for scores",
                annotation=ScoreSortType,
                required=True,
            ),
            attr("scoreRangeStart", "Start of the score range"),
            attr("scoreRangeEnd", "End of the score range"),
            attr("recurrenceStartDate", "Start date for recurring leaderboard (ISO 8601)"),
            attr("recurrenceDuration", "Duration of each recurrence period"),
            attr("recurrenceRule", "Recurrence rule for the leaderboard"),
        ),
    ),
    Endpoint(
        name="update_game_center_leaderboard",
        description="Update an existing Game Center leaderboard.",
        method="PATCH",
        path="/v1/gameCenterLeaderboards/{id}",
        resource_type="gameCenterLeaderboards",
        params=(
            resource_id("The Game Center leaderboard ID"),
            attr("defaultFormatter", "Updated default formatter", annotation=ScoreFormatter),
            attr("referenceName", "Updated reference name"),
            attr("submissionType", "Updated submission type", annotation=SubmissionType),
            attr("scoreSortType", "Updated sort order", annotation=ScoreSortType),
            attr("scoreRangeStart", "Updated start of score range"),
            attr("scoreRangeEnd", "Updated end of score range"),
            attr("recurrenceStartDate", "Updated recurrence start date"),
            attr("recurrenceDuration", "Updated recurrence duration"),
            attr("recurrenceRule", "Updated recurrence rule"),
        ),
    ),
    Endpoint(
        name="delete_game_center_leaderboard",
        description="Delete a Game Center leaderboard.",
        method="DELETE",
        path="/v1/gameCenterLeaderboards/{id}",
        params=(path_id("id", "The Game Center leaderboard ID to delete"),),
        ack="Deleted Game Center leaderboard {id}",
    ),
)

ACHIEVEMENT_ENDPOINTS = (
    Endpoint(
        name="list_game_center_achievements",
        description="List Game Center achievements for a Game Center detail.",
        method="GET",
        path="/v1/gameCenterDetails/{detail_id}/gameCenterAchievements",
        params=(path_id("detail_id", DETAIL_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_game_center_achievement",
        description="Create a new Game Center achievement.",
        method="POST",
        path="/v1/gameCenterAchievements",
        resource_type="gameCenterAchievements",
        params=(
            _detail("achievement"),
            attr("referenceName", "A reference name for the achievement", required=True),
            attr(
                "vendorIdentifier",
                "A unique vendor identifier for the achievement",
                required=True,
            ),
            attr("points", "Point value of the achievement", annotation=int, required=True),
            attr(
                "showBeforeEarned",
                "Whether to show the achievement before it is earned",
                annotation=bool,
                required=True,
            ),
            attr(
                "repeatable",
                "Whether the achievement can be earned multiple times",
                annotation=bool,
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="update_game_center_achievement",
        description="Update an existing Game Center achievement.",
        method="PATCH",
        path="/v1/gameCenterAchievements/{id}",
        resource_type="gameCenterAchievements",
        params=(
            resource_id("The Game Center achievement ID"),
            attr("referenceName", "Updated reference name"),
            attr("points", "Updated point value", annotation=int),
            attr("showBeforeEarned", "Updated show before earned setting", annotation=bool),
            attr("repeatable", "Updated repeatable setting", annotation=bool),
        ),
    ),
    Endpoint(
        name="delete_game_center_achievement",
        description="Delete a Game Center achievement.",
        method="DELETE",
        path="/v1/gameCenterAchievements/{id}",
        params=(path_id("id", "The Game Center achievement ID to delete"),),
        ack="Deleted Game Center achievement {id}",
    ),
)

GROUPING_ENDPOINTS = (
    Endpoint(
        name="list_game_center_leaderboard_sets",
        description="List Game Center leaderboard sets for a Game Center detail.",
        method="GET",
        path="/v1/gameCenterDetails/{detail_id}/gameCenterLeaderboardSets",
        params=(path_id("detail_id", DETAIL_ID), limit()),
        paginated=True,
    ),
    Endpoint(
        name="create_game_center_leaderboard_set",
        description="Create a new Game Center leaderboard set.",
        method="POST",
        path="/v1/gameCenterLeaderboardSets",
        resource_type="gameCenterLeaderboardSets",
        params=(
            _detail("leaderboard set"),
            attr("referenceName", "A reference name for the leaderboard set", required=True),
            attr(
                "vendorIdentifier",
                "A unique vendor identifier for the leaderboard set",
                required=True,
            ),
        ),
    ),
    Endpoint(
        name="delete_game_center_leaderboard_set",
        description="Delete a Game Center leaderboard set.",
        method="DELETE",
        path="/v1/gameCenterLeaderboardSets/{id}",
        params=(path_id("id", "The Game Center leaderboard set ID to delete"),),
        ack="Deleted Game Center leaderboard set {id}",
    ),
    Endpoint(
        name="list_game_center_groups",
        description="List Game Center groups, including their Game Center details.",
        method="GET",
        path="/v1/gameCenterGroups",
        params=(limit(),),
        fixed_query={"include": "gameCenterDetails"},
        paginated=True,
    ),
    Endpoint(
        name="create_game_center_group",
        description="Create a new Game Center group.",
        method="POST",
        path="/v1/gameCenterGroups",
        resource_type="gameCenterGroups",
        params=(attr("referenceName", "A reference name for the group", required=True),),
    ),
)

ENDPOINTS = LEADERBOARD_ENDPOINTS + ACHIEVEMENT_ENDPOINTS + GROUPING_ENDPOINTS
