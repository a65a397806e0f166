"""Seed a verified, active superadmin user."""

from app import create_app
from models import db
from repositories import users


def main() -> None:
    app = create_app()
    with app.app_context():
        email = app.config["SUPERADMIN_EMAIL"]
        password = app.config["SUPERADMIN_PASSWORD"]
        fullname = app.config["SUPERADMIN_FULLNAME"]

        admin = users.find_user_by_email(email)
        if admin is None:
            admin = users.create_user(
                fullname, email, password, "superadmin", is_active=True
            )
            action = "created"
        else:
            admin.user_role = "superadmin"
            admin.is_active = True
            admin.set_password(password)
            action = "updated"
        admin.mark_email_verified()
        db.session.commit()
        print(f"Superadmin user {action}: {admin.email}")


if __name__ == "__main__":
    main()
