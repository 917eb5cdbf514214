"""unionvote CLI entry point."""

import click

from unionvote.common.logging import setup_logging
from unionvote.infrastructure.config.settings import get_settings
from unionvote.interfaces.cli.base import build_context
from unionvote.interfaces.cli.commands.ballot_commands import has_voted, vote
from unionvote.interfaces.cli.commands.candidate_commands import (
    add_candidates,
    remove_candidate,
    update_candidate,
)
from unionvote.interfaces.cli.commands.election_commands import (
    create,
    edit,
    init_db,
    list_elections,
    results,
    set_status,
    show,
)


@click.group()
@click.option(
    "--database-url",
    envvar="UNIONVOTE_DATABASE_URL",
    default=None,
    help="接続先データベースURL",
)
@click.option("--actor", "actor_id", default="cli", show_default=True, help="操作するユーザーID")
@click.option("--admin/--no-admin", default=False, help="管理者として操作する")
@click.pass_context
def cli(ctx: click.Context, database_url: str | None, actor_id: str, admin: bool):
    """学生自治会の選挙管理 (unionvote)."""
    settings = get_settings()
    setup_logging(settings.log_level, settings.json_logs)
    ctx.obj = build_context(database_url, actor_id, admin)


cli.add_command(init_db)
cli.add_command(create)
cli.add_command(list_elections)
cli.add_command(show)
cli.add_command(results)
cli.add_command(edit)
cli.add_command(set_status)
cli.add_command(add_candidates)
cli.add_command(update_candidate)
cli.add_command(remove_candidate)
cli.add_command(vote)
cli.add_command(has_voted)


if __name__ == "__main__":
    cli()
