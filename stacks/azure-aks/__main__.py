"""
Azure AKS + MySQL
=================
Resource group, storage account (checkpoint + policy pack blobs),
MySQL flexible server, AD service principal and an AKS cluster.
"""

import pulumi

from cloud_stacks.aks import cluster, database, group, storage

# -- Outputs -------------------------------------------------------------------

pulumi.export("kubeconfig",          cluster.kubeconfig)
pulumi.export("dbEndpoint",          database.server.fully_qualified_domain_name)
pulumi.export("dbServerName",        database.server.name)
pulumi.export("dbUsername",          database.server.administrator_login)
pulumi.export("password",            pulumi.Output.secret(group.password.result))
pulumi.export("storageKey1",         pulumi.Output.secret(storage.storage_key1))
pulumi.export("storageKey2",         pulumi.Output.secret(storage.storage_key2))
pulumi.export("checkpointBlobId",    storage.checkpoint_blob.id)
pulumi.export("policypackBlobId",    storage.policy_blob.id)
pulumi.export("checkpointBlobName",  storage.checkpoint_blob.name)
pulumi.export("policypackBlobName",  storage.policy_blob.name)
pulumi.export("storageAccountName",  storage.storage_account.name)
