"""
AKS managed cluster
===================
One VMSS system pool, RBAC on, service principal identity, SSH access for
the Linux admin. The kubeconfig is pulled through the listClusterUserCredentials
invoke and decoded for export.
"""

import base64

import pulumi
from pulumi_azure_native import containerservice

from cloud_stacks.aks import SETTINGS, TAGS
from cloud_stacks.aks.group import resource_group
from cloud_stacks.aks.identity import ad_app, ad_sp_password, ssh_key

CLUSTER_NAME = "my-aks"

cluster = containerservice.ManagedCluster(
    CLUSTER_NAME,
    resource_group_name=resource_group.name,
    agent_pool_profiles=[{
        "count": SETTINGS.node_count,
        "max_pods": SETTINGS.max_pods,
        "mode": "System",
        "name": "agentpool",
        "os_disk_size_gb": SETTINGS.os_disk_size_gb,
        "os_type": "Linux",
        "type": "VirtualMachineScaleSets",
        "vm_size": SETTINGS.node_vm_size,
    }],
    dns_prefix=SETTINGS.dns_prefix,
    enable_rbac=True,
    kubernetes_version=SETTINGS.kubernetes_version,
    linux_profile={
        "admin_username": SETTINGS.admin_username,
        "ssh": {
            "public_keys": [{"key_data": ssh_key.public_key_openssh}],
        },
    },
    node_resource_group=resource_group.name.apply(lambda rg: f"MC_{rg}_{CLUSTER_NAME}"),
    service_principal_profile={
        "client_id": ad_app.client_id,
        "secret": ad_sp_password.value,
    },
    tags=TAGS,
)


def decode_kubeconfig(encoded) -> str:
    """Kubeconfigs come back base64 encoded; return them as UTF-8 text."""
    if isinstance(encoded, str):
        encoded = encoded.encode("ascii")
    return base64.b64decode(encoded).decode("utf-8")


def get_kubeconfig(resource_group_name: pulumi.Input[str], cluster_name: pulumi.Input[str]) -> pulumi.Output[str]:
    credentials = containerservice.list_managed_cluster_user_credentials_output(
        resource_group_name=resource_group_name,
        resource_name=cluster_name,
    )
    return pulumi.Output.secret(
        credentials.apply(lambda c: decode_kubeconfig(c.kubeconfigs[0].value))
    )


kubeconfig = get_kubeconfig(resource_group.name, cluster.name)
