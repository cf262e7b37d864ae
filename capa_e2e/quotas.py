"""AWS service quotas the suite needs before it starts provisioning.

Service codes and quotas can be found under:
https://us-west-1.console.aws.amazon.com/servicequotas/home/services
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict


@dataclass(frozen=True)
class ServiceQuota:
    """A service quota and the minimum value the suite needs for it."""

    service_code: str
    quota_name: str
    quota_code: str
    desired_minimum_value: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


def get_limited_resources() -> Dict[str, ServiceQuota]:
    """Return the quotas to check, keyed by short resource identifier.

    A new mapping is built on every call.
    """
    service_quotas: Dict[str, ServiceQuota] = {}

    service_quotas["igw"] = ServiceQuota(
        service_code="vpc",
        quota_name="Internet gateways per Region",
        quota_code="L-A4707A72",
        desired_minimum_value=20,
    )

    service_quotas["ngw"] = ServiceQuota(
        service_code="vpc",
        quota_name="NAT gateways per Availability Zone",
        quota_code="L-FE5A380F",
        desired_minimum_value=20,
    )

    service_quotas["vpc"] = ServiceQuota(
        service_code="vpc",
        quota_name="VPCs per Region",
        quota_code="L-F678F1CE",
        desired_minimum_value=25,
    )

    service_quotas["ec2-normal"] = ServiceQuota(
        service_code="ec2",
        quota_name="Running On-Demand Standard (A, C, D, H, I, M, R, T, Z) instances",
        quota_code="L-1216C47A",
        desired_minimum_value=128,
    )

    service_quotas["eip"] = ServiceQuota(
        service_code="ec2",
        quota_name="EC2-VPC Elastic IPs",
        quota_code="L-0263D0A3",
        desired_minimum_value=100,
    )

    service_quotas["classiclb"] = ServiceQuota(
        service_code="elasticloadbalancing",
        quota_name="Classic Load Balancers per Region",
        quota_code="L-E9E9831D",
        desired_minimum_value=20,
    )

    service_quotas["ec2-GPU"] = ServiceQuota(
        service_code="ec2",
        quota_name="Running On-Demand G and VT instances",
        quota_code="L-DB2E81BA",
        desired_minimum_value=8,
    )

    service_quotas["volume-GP2"] = ServiceQuota(
        service_code="ebs",
        quota_name="Storage for General Purpose SSD (gp2) volumes, in TiB",
        quota_code="L-D18FCD1D",
        desired_minimum_value=50,
    )

    service_quotas["eventBridge-rules"] = ServiceQuota(
        service_code="events",
        quota_name="Maximum number of rules an account can have per event bus",
        quota_code="L-244521F2",
        desired_minimum_value=500,
    )

    return service_quotas
