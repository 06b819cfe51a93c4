"""
Web server component
====================
A security group that only opens HTTP, and one Ubuntu instance in it.
The instance is deliberately left without user data; tests/test_webserver.py
pins that down along with the Name tag and the closed SSH port.
"""

import pulumi
import pulumi_aws as aws

from cloud_stacks.config import WebserverSettings


class Infrastructure(pulumi.ComponentResource):
    """Owns `group` (aws.ec2.SecurityGroup) and `server` (aws.ec2.Instance)."""

    def __init__(self, name, settings=None, tags=None, opts=None):
        super().__init__("cloud-stacks:webserver:Infrastructure", name, None, opts)
        settings = settings or WebserverSettings()
        tags = tags or {}
        child = pulumi.ResourceOptions(parent=self)

        self.group = aws.ec2.SecurityGroup(
            f"{name}-web-secgrp",
            description="Web server - HTTP from internet",
            ingress=[
                aws.ec2.SecurityGroupIngressArgs(
                    protocol="tcp",
                    from_port=settings.http_port,
                    to_port=settings.http_port,
                    cidr_blocks=["0.0.0.0/0"],
                ),
            ],
            tags={**tags, "Name": f"{name}-web-secgrp"},
            opts=child,
        )

        ami = aws.ec2.get_ami(
            most_recent=True,
            owners=[settings.ami_owner],
            filters=[{"name": "name", "values": [settings.ami_name_filter]}],
        )
        pulumi.log.debug(f"web server AMI {ami.id}", resource=self)

        self.server = aws.ec2.Instance(
            f"{name}-web-server-www",
            instance_type=settings.instance_type,
            vpc_security_group_ids=[self.group.id],
            ami=ami.id,
            tags={**tags, "Name": f"{name}-webserver"},
            opts=child,
        )

        self.register_outputs({
            "group_id": self.group.id,
            "server_id": self.server.id,
            "public_ip": self.server.public_ip,
            "public_dns": self.server.public_dns,
        })
