"""
Storage account with two blob containers: checkpoints and policy packs.
Account keys come from the listKeys invoke, not from resource outputs.
"""

from pulumi_azure_native import storage

from cloud_stacks.aks import TAGS
from cloud_stacks.aks.group import resource_group

storage_account = storage.StorageAccount(
    "sa",
    resource_group_name=resource_group.name,
    sku=storage.SkuArgs(name=storage.SkuName.STANDARD_LRS),
    kind=storage.Kind.STORAGE_V2,
    tags=TAGS,
)

checkpoint_blob = storage.BlobContainer(
    "check-blob",
    resource_group_name=resource_group.name,
    account_name=storage_account.name,
)

policy_blob = storage.BlobContainer(
    "policy-blob",
    resource_group_name=resource_group.name,
    account_name=storage_account.name,
)

storage_keys = storage.list_storage_account_keys_output(
    resource_group_name=resource_group.name,
    account_name=storage_account.name,
)

storage_key1 = storage_keys.apply(lambda s: s.keys[0].value)
storage_key2 = storage_keys.apply(lambda s: s.keys[1].value)
