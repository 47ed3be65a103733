"""Rich renderables for users and credentials."""

from rich.table import Table

from usercred.domain.accounts import User


def _format_datetime(value) -> str:
    return value.strftime("%Y-%m-%d %H:%M:%S") if value else "-"


def users_table(users: list[User], title: str = "Users") -> Table:
    table = Table(title=title)
    table.add_column("ID", justify="right", style="cyan")
    table.add_column("Username", style="bold")
    table.add_column("Name")
    table.add_column("Email")
    table.add_column("Active")
    table.add_column("Credential")

    for user in users:
        table.add_row(
            str(user.id),
            user.username,
            user.full_name,
            user.email,
            "yes" if user.active else "no",
            f"#{user.credential.id}" if user.credential else "-",
        )
    return table


def user_detail_table(user: User) -> Table:
    """Key/value view of a single user and its credential metadata."""
    table = Table(title=f"User {user.username}", show_header=False)
    table.add_column("Field", style="cyan")
    table.add_column("Value")

    table.add_row("ID", str(user.id))
    table.add_row("First name", user.first_name)
    table.add_row("Last name", user.last_name)
    table.add_row("Username", user.username)
    table.add_row("Email", user.email)
    table.add_row("Active", "yes" if user.active else "no")
    table.add_row("Registered", _format_datetime(user.registered_at))

    credential = user.credential
    if credential is None:
        table.add_row("Credential", "[yellow]none[/yellow]")
    else:
        table.add_row("Credential", f"#{credential.id}")
        table.add_row("Last changed", _format_datetime(credential.last_changed))
        table.add_row("Require reset", "yes" if credential.require_reset else "no")
    return table
