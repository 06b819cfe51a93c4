"""Resource group and the generated password shared by MySQL and the AKS service principal."""

import pulumi_azure_native as azure_native
import pulumi_random as random

from cloud_stacks.aks import SETTINGS, TAGS

resource_group = azure_native.resources.ResourceGroup(
    "azure-py-aks",
    tags=TAGS,
)

password = random.RandomPassword(
    "password",
    length=SETTINGS.password_length,
    special=True,
)
