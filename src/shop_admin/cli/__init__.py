"""Shop admin management CLI."""

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.table import Table
from sqlmodel import Session

from src.shop_admin.core.errors import AppError
from src.shop_admin.core.models.user import UserCreationRequest
from src.shop_admin.core.security import Principal
from src.shop_admin.core.services import (
    DbSessionService,
    JwtService,
    PasswordHasher,
    UserService,
)
from src.shop_admin.core.services.database.db_manage import DbManageService
from src.shop_admin.entities.core.user import UserRepository
from src.shop_admin.entities.enums import PredefinedRole
from src.shop_admin.runtime.context import get_config

console = Console()

app = typer.Typer(
    help="🛠️  Shop Admin CLI - database setup and account management",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

DatabaseUrlOption = typer.Option(
    None, "--database-url", help="Database URL, defaults to the configured one"
)

# Acts on behalf of the operator running the CLI
_CLI_PRINCIPAL = Principal(username="cli", roles=frozenset({PredefinedRole.ADMIN}))


def _database_service(database_url: str | None) -> DbSessionService:
    db_config = get_config().database
    if database_url:
        db_config = db_config.model_copy(update={"url": database_url})
    return DbSessionService(db_config)


@app.command("init-db")
def init_db_command(database_url: str | None = DatabaseUrlOption) -> None:
    """Create all tables and seed the predefined roles."""
    database_service = _database_service(database_url)
    db_manage_service = DbManageService(database_service.engine)
    db_manage_service.create_all()
    added = db_manage_service.seed_roles()
    console.print(f"[green]✅ Database initialized ({added} role(s) seeded)[/green]")


@app.command("create-admin")
def create_admin(
    username: str = typer.Argument(..., help="Username for the new administrator"),
    email: str = typer.Option(..., "--email", "-e", help="Email address"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, help="Password"
    ),
    database_url: str | None = DatabaseUrlOption,
) -> None:
    """Create a user holding the ADMIN role."""
    try:
        request = UserCreationRequest(username=username, email=email, password=password)
    except ValidationError as e:
        console.print(f"[red]❌ Invalid administrator details:\n{escape(str(e))}[/red]")
        raise typer.Exit(code=1) from e

    database_service = _database_service(database_url)
    hasher = PasswordHasher(rounds=get_config().security.bcrypt_rounds)

    with Session(database_service.engine) as session:
        service = UserService(session, hasher, _CLI_PRINCIPAL)
        try:
            created = service.create_user(request)
            admin = service.update_role(created.id, PredefinedRole.ADMIN)
        except AppError as e:
            console.print(f"[red]❌ Failed to create admin '{username}': {escape(e.message)}[/red]")
            raise typer.Exit(code=1) from e

    table = Table(title="Administrator created")
    table.add_column("ID", style="cyan")
    table.add_column("Username", style="green")
    table.add_column("Email", style="blue")
    table.add_column("Roles", style="magenta")
    table.add_row(admin.id, admin.username, admin.email or "", ", ".join(admin.roles))
    console.print(table)


@app.command("issue-token")
def issue_token(
    username: str = typer.Argument(..., help="Existing username"),
    expires_in: int | None = typer.Option(
        None, "--expires-in", help="Token lifetime in seconds"
    ),
    database_url: str | None = DatabaseUrlOption,
) -> None:
    """Print an access token for an existing user."""
    database_service = _database_service(database_url)
    with Session(database_service.engine) as session:
        user = UserRepository(session).get_by_username(username)
        if user is None:
            console.print(f"[red]❌ User '{username}' does not exist[/red]")
            raise typer.Exit(code=1)
        roles = user.role_names

    token = JwtService(get_config().jwt).generate_access_token(
        username, roles, expires_in_seconds=expires_in
    )
    # Plain print so the token can be piped
    typer.echo(token)


@app.command("serve")
def serve(
    host: str | None = typer.Option(None, "--host", help="Bind address"),
    port: int | None = typer.Option(None, "--port", help="Bind port"),
    reload: bool = typer.Option(False, "--reload", help="Reload on code changes"),
) -> None:
    """Run the HTTP API with uvicorn."""
    import uvicorn

    config = get_config()
    uvicorn.run(
        "src.shop_admin.api.http.app:app",
        host=host or config.app.host,
        port=port or config.app.port,
        reload=reload,
        access_log=False,
    )


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
