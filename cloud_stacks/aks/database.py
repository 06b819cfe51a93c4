"""
MySQL flexible server
=====================
General Purpose SKU, 128 GB, 7 day geo-redundant backups, TLS required.
No delegated subnet, so the server is reachable on its public endpoint.
The firewall rule opens the full IPv4 range; narrow it per stack when the
callers are known.
"""

import pulumi
from pulumi_azure_native import dbformysql

from cloud_stacks.aks import SETTINGS, TAGS
from cloud_stacks.aks.group import password, resource_group

server = dbformysql.Server(
    "server",
    resource_group_name=resource_group.name,
    server_name=SETTINGS.mysql_server_name,
    administrator_login=SETTINGS.mysql_admin_login,
    administrator_login_password=password.result,
    create_mode="Default",
    version=SETTINGS.mysql_version,
    sku={
        "name": SETTINGS.mysql_sku,
        "tier": "GeneralPurpose",
    },
    storage={
        "storage_size_gb": SETTINGS.mysql_storage_gb,
    },
    backup={
        "backup_retention_days": SETTINGS.mysql_backup_retention_days,
        "geo_redundant_backup": "Enabled",
    },
    tags={**TAGS, **SETTINGS.server_tags},
)

# flexible servers enforce TLS through a server parameter
secure_transport = dbformysql.Configuration(
    "require-secure-transport",
    resource_group_name=resource_group.name,
    server_name=server.name,
    configuration_name="require_secure_transport",
    value="ON",
    source="user-override",
)

db = dbformysql.Database(
    "db",
    resource_group_name=resource_group.name,
    server_name=server.name,
    database_name=SETTINGS.database_name,
    charset="utf8",
    collation="utf8_general_ci",
)

firewall_rule = dbformysql.FirewallRule(
    "fw-rule",
    resource_group_name=resource_group.name,
    server_name=server.name,
    start_ip_address="0.0.0.0",
    end_ip_address="255.255.255.255",
)

pulumi.log.info(f"MySQL {SETTINGS.mysql_version} admin login: {SETTINGS.mysql_admin_login}")
