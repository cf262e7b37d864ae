"""Constants shared by the end-to-end suite.

Most of these are either environment variable keys read by the cluster
templates or the names of template flavors under the data folder.
"""

# Defaults
DEFAULT_SSH_KEY_PAIR_NAME = "cluster-api-provider-aws-sigs-k8s-io"
AMI_PREFIX = "capa-ami-ubuntu-24.04-"
DEFAULT_IMAGE_LOOKUP_ORG = "819546954734"

# Environment variable keys
KUBERNETES_VERSION = "KUBERNETES_VERSION"
KUBERNETES_VERSION_MANAGEMENT = "KUBERNETES_VERSION_MANAGEMENT"
CNI_PATH = "CNI"
CNI_RESOURCES = "CNI_RESOURCES"
CNI_ADDON_VERSION = "VPC_ADDON_VERSION"
GC_WORKLOAD_PATH = "GC_WORKLOAD"
KUBEPROXY_ADDON_VERSION = "KUBE_PROXY_ADDON_VERSION"
AWS_NODE_MACHINE_TYPE = "AWS_NODE_MACHINE_TYPE"
AWS_AVAILABILITY_ZONE_1 = "AWS_AVAILABILITY_ZONE_1"
AWS_AVAILABILITY_ZONE_2 = "AWS_AVAILABILITY_ZONE_2"
INSTANCE_VCPU = "AWS_MACHINE_TYPE_VCPU_USAGE"
EKS_UPGRADE_FROM_VERSION = "UPGRADE_FROM_VERSION"
EKS_UPGRADE_TO_VERSION = "UPGRADE_TO_VERSION"
CLASSIC_ELB_TEST_KUBERNETES_FROM = "CLASSICELB_TEST_KUBERNETES_VERSION_FROM"
CLASSIC_ELB_TEST_KUBERNETES_TO = "CLASSICELB_TEST_KUBERNETES_VERSION_TO"

# Prefix of the per-role multi-tenancy variables (MULTI_TENANCY_<TAG>_...)
MULTI_TENANCY = "MULTI_TENANCY_"

# Cluster template flavors
MULTI_AZ_FLAVOR = "multi-az"
LIMIT_AZ_FLAVOR = "limit-az"
SPOT_INSTANCES_FLAVOR = "spot-instances"
SSM_FLAVOR = "ssm"
TOPOLOGY_FLAVOR = "topology"
SELF_HOSTED_CLUSTER_CLASS_FLAVOR = "self-hosted-clusterclass"
UPGRADE_TO_MAIN = "upgrade-to-main"
EXTERNAL_CLOUD_PROVIDER = "external-cloud-provider"
SIMPLE_MULTITENANCY_FLAVOR = "simple-multitenancy"
NESTED_MULTITENANCY_FLAVOR = "nested-multitenancy"
NESTED_MULTITENANCY_CLUSTER_CLASS_FLAVOR = "nested-multitenancy-clusterclass"
KCP_SCALE_IN_FLAVOR = "kcp-scale-in"
IGNITION_FLAVOR = "ignition"
GPU_FLAVOR = "gpu"
EFS_SUPPORT = "efs-support"
INTREE_CLOUD_PROVIDER = "intree-cloud-provider"

STORAGE_CLASS_OUT_TREE_ZONE_LABEL = "topology.ebs.csi.aws.com/zone"

# Lock file recording resource usage across parallel suite runs
RESOURCE_QUOTA_FILE_PATH = "/tmp/capa-e2e-resource-usage.lock"

DEFAULT_SOURCE_TEMPLATE = "infrastructure-aws/withoutclusterclass/generated/cluster-template.yaml"
