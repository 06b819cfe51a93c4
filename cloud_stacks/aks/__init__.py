"""AKS cluster with a managed MySQL server and a storage account."""

import pulumi

from cloud_stacks.config import AksSettings, base_tags

SETTINGS = AksSettings.from_config(pulumi.Config())

TAGS = base_tags(pulumi.get_project(), pulumi.get_stack())
