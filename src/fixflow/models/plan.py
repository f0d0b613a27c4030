"""
Subscription plan catalogue.
"""

from pydantic import BaseModel, ConfigDict

from fixflow.models.session import PlanType


class PlanConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    description: str
    price: int  # monthly USD, 0 = custom pricing
    features: tuple[str, ...]
    is_popular: bool = False


PLAN_CONFIGS: dict[PlanType, PlanConfig] = {
    PlanType.SOLO: PlanConfig(
        name="Solo Plan",
        description="Perfect for individual entrepreneurs",
        price=29,
        features=("Single User", "Basic Reporting", "Email Support", "Limited Work Orders"),
    ),
    PlanType.TEAM: PlanConfig(
        name="Team Plan",
        description="Ideal for small teams",
        price=99,
        features=("Multiple Users", "Advanced Reporting", "Priority Support", "Unlimited Work Orders"),
        is_popular=True,
    ),
    PlanType.BUSINESS: PlanConfig(
        name="Business Plan",
        description="Scalable solution for growing businesses",
        price=249,
        features=("Unlimited Users", "Advanced Analytics", "Dedicated Support", "Custom Integrations"),
    ),
    PlanType.ENTERPRISE: PlanConfig(
        name="Enterprise Plan",
        description="Comprehensive solution for large organizations",
        price=0,
        features=("Unlimited Everything", "Dedicated Account Manager", "24/7 Premium Support", "Custom Development"),
    ),
}
