import argparse
import sys

from app.db.database import SessionLocal
from app.db.repositories import TeamRepository, UserRepository
from app.services.security import create_access_token

"""
CLI usage (local development only):
python -m scripts.issue_token <user_email> [--team-id N] [--ability A ...] [--minutes M]
Prints a bearer token for the given user scoped to one of their teams.
"""


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Mint a bearer token for a local user")
    parser.add_argument("email")
    parser.add_argument("--team-id", type=int, default=None, help="team scope; defaults to the user's current team")
    parser.add_argument("--ability", action="append", default=[], help="granted ability, repeatable (e.g. read, view:sensitive)")
    parser.add_argument("--minutes", type=int, default=None, help="token lifetime in minutes")
    args = parser.parse_args(argv)

    with SessionLocal() as db:
        user = UserRepository(db).get_by_email(args.email)
        if user is None:
            print(f"No user with email {args.email}", file=sys.stderr)
            return 1
        teams = TeamRepository(db)
        if args.team_id is not None:
            team = teams.find_by_id_for_caller(user.id, args.team_id)
            if team is None:
                print(f"User {args.email} is not a member of team {args.team_id}", file=sys.stderr)
                return 2
        else:
            team = teams.current_team(user.id)
            if team is None:
                print(f"User {args.email} belongs to no team", file=sys.stderr)
                return 2
        token = create_access_token(
            str(user.id),
            team_id=team.id,
            abilities=args.ability or ["read"],
            expires_minutes=args.minutes,
        )
    print(token)
    return 0


if __name__ == '__main__':
    sys.exit(main())
