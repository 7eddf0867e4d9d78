"""Read-mostly account administration resources."""

from __future__ import annotations

from .base import AllMixin, Resource, UpdateMixin, ViewMixin


class Product(AllMixin, ViewMixin, Resource):
    endpoint = "/products"


class EmailConfig(AllMixin, ViewMixin, Resource):
    endpoint = "/email_configs"


class SLAPolicy(AllMixin, UpdateMixin, Resource):
    endpoint = "/sla_policies"


class BusinessHour(AllMixin, ViewMixin, Resource):
    endpoint = "/business_hours"
