"""CLI interface for the FitQuest planner and quest API."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

import click

from fitquest.client import SubmitError, load_responses, submit_survey
from fitquest.config import Config
from fitquest.errors import ProfileFileError
from fitquest.logging import setup_logging
from fitquest.models import FitnessBaseline, FitnessGoals
from fitquest.planner import plan_daily_missions
from fitquest.presets import PRESETS
from fitquest.profiles import load_profile
from fitquest.questionnaire import Questionnaire, label
from fitquest.report import format_plan_report

logger = logging.getLogger(__name__)


@click.group()
@click.pass_context
def main(ctx: click.Context):
    """FitQuest: daily fitness missions from your baseline and goals."""
    config = Config.from_env()
    setup_logging(config.log_format, config.log_level_value)
    ctx.obj = config


def _print_plan(baseline: FitnessBaseline, goals: FitnessGoals) -> None:
    missions = plan_daily_missions(baseline, goals)
    click.echo(format_plan_report(baseline, goals, missions))


@main.command()
@click.option(
    "--preset",
    type=click.Choice(list(PRESETS.keys())),
    help="Use a preset baseline and goals.",
)
@click.option(
    "--profile-file",
    type=click.Path(exists=True, path_type=Path),
    help="Load baseline and goals from a JSON file.",
)
def plan(preset: str | None, profile_file: Path | None):
    """Build today's workout plan (interactive unless a profile is given)."""
    if preset and profile_file:
        click.echo("Error: Specify either --preset or --profile-file, not both.", err=True)
        sys.exit(1)

    if preset:
        baseline, goals = PRESETS[preset]
        _print_plan(baseline, goals)
        return

    if profile_file:
        try:
            baseline, goals = load_profile(profile_file)
        except ProfileFileError as e:
            click.echo(f"Error: {e.message}", err=True)
            sys.exit(1)
        _print_plan(baseline, goals)
        return

    questionnaire = Questionnaire(input_stream=click.get_text_stream("stdin"))
    try:
        click.echo("Welcome to your Personal Fitness Quest Generator!\n")
        baseline = questionnaire.collect_baseline()
        goals = questionnaire.collect_goals()
        _print_plan(baseline, goals)
    except click.Abort:
        raise
    except Exception as e:
        logger.exception("Questionnaire failed")
        click.echo(f"An error occurred: {e}", err=True)
        sys.exit(1)
    finally:
        questionnaire.close()


@main.command("list-presets")
def list_presets():
    """List available preset profiles."""
    for name, (baseline, goals) in PRESETS.items():
        click.echo(f"{name}:")
        click.echo(f"  Goal: {label(goals.primary_goal)}")
        click.echo(f"  Experience: {baseline.experience}")
        click.echo(f"  Time available: {baseline.time_available:g} min/day")
        click.echo(f"  Equipment: {', '.join(baseline.equipment)}")
        click.echo(
            "  Strength/Endurance/Flexibility: "
            f"{baseline.current_strength:g}->{goals.target_strength:g}, "
            f"{baseline.current_endurance:g}->{goals.target_endurance:g}, "
            f"{baseline.current_flexibility:g}->{goals.target_flexibility:g}"
        )
        click.echo()


@main.command()
@click.option("--host", type=str, help="Bind address (default from FITQUEST_HOST).")
@click.option("--port", type=int, help="Port (default from FITQUEST_PORT).")
@click.pass_obj
def serve(config: Config, host: str | None, port: int | None):
    """Run the quest HTTP API."""
    import uvicorn

    from fitquest.api import create_app

    host = host or config.host
    port = port or config.port
    logger.info("Starting FitQuest API on %s:%d", host, port)
    uvicorn.run(create_app(config=config), host=host, port=port, log_config=None)


@main.command("submit-survey")
@click.option("--api", required=True, type=str, help="API base URL (e.g. http://localhost:8000).")
@click.option("--name", required=True, type=str, help="Name of the new user.")
@click.option(
    "--responses", "responses_file",
    required=True,
    type=click.Path(exists=True, path_type=Path),
    help="JSON list of survey responses.",
)
def submit_survey_command(api: str, name: str, responses_file: Path):
    """Create a quest user from a survey file on a running API."""
    try:
        responses = load_responses(responses_file)
        click.echo(f"Submitting {len(responses)} responses to {api}...")
        result = submit_survey(api, name, responses)
    except (SubmitError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    click.echo(f"Created user {result['user_id']}")
    for mission in result["initial_missions"]:
        click.echo(
            f"  [{mission['category']}] {mission['title']} "
            f"({mission['estimated_time']:g} min, {mission['xp_reward']} XP, "
            f"{mission['coin_reward']} coins)"
        )
