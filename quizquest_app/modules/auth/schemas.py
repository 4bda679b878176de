from dataclasses import dataclass

from marshmallow import Schema, fields, validate


class RegisterSchema(Schema):
    username = fields.String(required=True, validate=validate.Length(min=3, max=80))
    email = fields.Email(required=True)
    password = fields.String(required=True, load_only=True, validate=validate.Length(min=6))


class LoginSchema(Schema):
    username = fields.String(required=True)
    password = fields.String(required=True, load_only=True)
    remember = fields.Boolean(load_default=False)


@dataclass
class UserDTO:
    id: int
    username: str
    email: str
    subscription_plan: str

    @classmethod
    def from_model(cls, user) -> "UserDTO":
        return cls(
            id=user.user_id,
            username=user.username,
            email=user.email,
            subscription_plan=user.subscription_plan,
        )
