"""
Stack settings
==============
Every program reads its knobs from Pulumi config with a default for each one,
so `pulumi up` works on a fresh stack without any `pulumi config set`.
"""

import ipaddress
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple

import pulumi


def base_tags(project: str, stack: str) -> Dict[str, str]:
    """Tags applied to every taggable resource; callers merge in a Name."""
    return {
        "Project":     project,
        "ManagedBy":   "pulumi",
        "Environment": stack,
    }


def _or_default(value, default):
    """Config getters return None when unset; 0 is a real value."""
    return default if value is None else value


def _split_suffixes(value: Optional[str]) -> Tuple[str, ...]:
    if not value:
        return ()
    return tuple(s.strip() for s in value.split(",") if s.strip())


def _check_percent(name: str, value: float):
    if not 0 < value <= 100:
        raise pulumi.RunError(f"{name} must be in (0, 100], got {value}")


@dataclass(frozen=True)
class FargateSettings:
    region: str = "eu-west-1"
    vpc_cidr: str = "10.0.0.0/16"
    zone_suffixes: Tuple[str, ...] = ("a", "b")
    container_port: int = 3000
    health_check_path: str = "/health"
    app_path: str = "./app"
    cpu: str = "256"
    memory: str = "512"
    desired_count: int = 1
    min_capacity: int = 1
    max_capacity: int = 5
    cpu_target: float = 60.0
    memory_target: float = 80.0
    log_retention_days: int = 7

    def __post_init__(self):
        if not self.zone_suffixes:
            raise pulumi.RunError("zone_suffixes must name at least one availability zone")
        try:
            prefix = ipaddress.ip_network(self.vpc_cidr).prefixlen
        except ValueError as e:
            raise pulumi.RunError(f"vpc_cidr is not a valid network: {e}") from e
        # one /24 per zone
        if prefix > 24 or 2 ** (24 - prefix) < len(self.zone_suffixes):
            raise pulumi.RunError(
                f"vpc_cidr {self.vpc_cidr} cannot hold a /24 for each of {len(self.zone_suffixes)} zones"
            )
        if self.min_capacity < 0:
            raise pulumi.RunError(f"min_capacity must be >= 0, got {self.min_capacity}")
        if self.min_capacity > self.max_capacity:
            raise pulumi.RunError(
                f"min_capacity ({self.min_capacity}) exceeds max_capacity ({self.max_capacity})"
            )
        if not self.min_capacity <= self.desired_count <= self.max_capacity:
            raise pulumi.RunError(
                f"desired_count ({self.desired_count}) must sit between "
                f"{self.min_capacity} and {self.max_capacity}"
            )
        _check_percent("cpu_target", self.cpu_target)
        _check_percent("memory_target", self.memory_target)

    @property
    def availability_zones(self) -> Tuple[str, ...]:
        return tuple(f"{self.region}{suffix}" for suffix in self.zone_suffixes)

    @classmethod
    def from_config(cls, config: pulumi.Config, aws_config: Optional[pulumi.Config] = None):
        aws_config = aws_config or pulumi.Config("aws")
        zones = config.get("zone_suffixes")
        return cls(
            region=aws_config.get("region") or cls.region,
            vpc_cidr=config.get("vpc_cidr") or cls.vpc_cidr,
            zone_suffixes=_split_suffixes(zones) or cls.zone_suffixes,
            container_port=_or_default(config.get_int("container_port"), cls.container_port),
            health_check_path=config.get("health_check_path") or cls.health_check_path,
            app_path=config.get("app_path") or cls.app_path,
            cpu=config.get("cpu") or cls.cpu,
            memory=config.get("memory") or cls.memory,
            desired_count=_or_default(config.get_int("desired_count"), cls.desired_count),
            min_capacity=_or_default(config.get_int("min_capacity"), cls.min_capacity),
            max_capacity=_or_default(config.get_int("max_capacity"), cls.max_capacity),
            cpu_target=_or_default(config.get_float("cpu_target"), cls.cpu_target),
            memory_target=_or_default(config.get_float("memory_target"), cls.memory_target),
            log_retention_days=_or_default(config.get_int("log_retention_days"), cls.log_retention_days),
        )


@dataclass(frozen=True)
class AksSettings:
    kubernetes_version: str = "1.30.6"
    node_count: int = 3
    node_vm_size: str = "Standard_DS2_v2"
    max_pods: int = 110
    os_disk_size_gb: int = 30
    admin_username: str = "testuser"
    dns_prefix: str = "AzureNativeprovider"
    mysql_admin_login: str = "cloudsa"
    mysql_server_name: Optional[str] = None
    mysql_version: str = "8.0.21"
    mysql_sku: str = "Standard_D2ds_v4"
    mysql_storage_gb: int = 128
    mysql_backup_retention_days: int = 7
    database_name: str = "pulumi"
    password_length: int = 20
    sp_password_end_date: str = "2099-01-01T00:00:00Z"
    server_tags: Dict[str, str] = field(default_factory=lambda: {"ElasticServer": "1"})

    def __post_init__(self):
        if self.node_count < 1:
            raise pulumi.RunError(f"node_count must be >= 1, got {self.node_count}")
        if self.password_length < 8:
            raise pulumi.RunError(
                f"password_length must be >= 8 for MySQL admin logins, got {self.password_length}"
            )
        if not 1 <= self.mysql_backup_retention_days <= 35:
            raise pulumi.RunError(
                f"mysql_backup_retention_days must be in [1, 35], got {self.mysql_backup_retention_days}"
            )

    @classmethod
    def from_config(cls, config: pulumi.Config):
        return cls(
            kubernetes_version=config.get("kubernetes_version") or cls.kubernetes_version,
            node_count=_or_default(config.get_int("node_count"), cls.node_count),
            node_vm_size=config.get("node_vm_size") or cls.node_vm_size,
            max_pods=_or_default(config.get_int("max_pods"), cls.max_pods),
            os_disk_size_gb=_or_default(config.get_int("os_disk_size_gb"), cls.os_disk_size_gb),
            admin_username=config.get("admin_username") or cls.admin_username,
            dns_prefix=config.get("dns_prefix") or cls.dns_prefix,
            mysql_admin_login=config.get("mysql_admin_login") or cls.mysql_admin_login,
            mysql_server_name=config.get("mysql_server_name"),
            mysql_version=config.get("mysql_version") or cls.mysql_version,
            mysql_sku=config.get("mysql_sku") or cls.mysql_sku,
            mysql_storage_gb=_or_default(config.get_int("mysql_storage_gb"), cls.mysql_storage_gb),
            mysql_backup_retention_days=(
                _or_default(config.get_int("mysql_backup_retention_days"), cls.mysql_backup_retention_days)
            ),
            database_name=config.get("database_name") or cls.database_name,
            password_length=_or_default(config.get_int("password_length"), cls.password_length),
        )


@dataclass(frozen=True)
class WebserverSettings:
    instance_type: str = "t2.micro"
    ami_name_filter: str = "ubuntu/images/hvm-ssd/ubuntu-bionic-18.04-amd64-server-*"
    ami_owner: str = "099720109477"
    http_port: int = 80

    @classmethod
    def from_config(cls, config: pulumi.Config):
        return cls(
            instance_type=config.get("instance_type") or cls.instance_type,
            ami_name_filter=config.get("ami_name_filter") or cls.ami_name_filter,
            ami_owner=config.get("ami_owner") or cls.ami_owner,
            http_port=_or_default(config.get_int("http_port"), cls.http_port),
        )
