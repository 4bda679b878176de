"""
Auth Service - Core authentication logic.

Handles user registration and credential checks.
Decouples DB logic from Routes.
"""
from flask import current_app
from sqlalchemy import or_

from quizquest_app.core.error_handlers import ValidationError
from quizquest_app.core.extensions import db
from quizquest_app.core.signals import user_registered
from quizquest_app.models import User


class AuthService:
    """Service for Authentication related operations."""

    @staticmethod
    def register_user(username, email, password, subscription_plan=User.PLAN_FREE):
        """
        Register a new user and emit user_registered.

        Raises:
            ValidationError if the username or email is taken.
        """
        taken = User.query.filter(or_(User.username == username, User.email == email)).first()
        if taken:
            field = 'username' if taken.username == username else 'email'
            raise ValidationError(f'{field.capitalize()} already registered', errors={field: ['Already in use.']})

        user = User(
            username=username,
            email=email,
            subscription_plan=subscription_plan,
        )
        user.set_password(password)
        db.session.add(user)
        db.session.commit()

        current_app.logger.info(f"User registered: {username} ({user.user_id})")

        try:
            user_registered.send(current_app._get_current_object(), user=user)
        except Exception as e:
            # Registration stays committed
            current_app.logger.error(f"Error emitting user_registered signal: {e}")

        return user

    @staticmethod
    def authenticate_user(username_or_email, password):
        """
        Verify credentials.

        Returns:
            User object if valid, None otherwise.
        """
        user = User.query.filter(
            or_(User.username == username_or_email, User.email == username_or_email)
        ).first()

        if user and user.check_password(password):
            return user

        return None
