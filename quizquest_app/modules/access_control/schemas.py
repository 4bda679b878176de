from marshmallow import Schema, fields


class PlanPermissionsSchema(Schema):
    plan = fields.String()
    plan_label = fields.String()
    accessible_tiers = fields.List(fields.String())
    permissions = fields.Dict(keys=fields.String(), values=fields.Boolean())
