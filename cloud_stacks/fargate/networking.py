"""
Fargate networking
==================
Public-only VPC (no NAT), one public subnet per AZ, ALB on :80 forwarding to
an `ip` target group on the container port. Tasks get public IPs and only
accept traffic from the ALB security group.
"""

import ipaddress

import pulumi
import pulumi_aws as aws

from cloud_stacks.fargate import SETTINGS, TAGS

PORT = SETTINGS.container_port

# -- VPC ------------------------------------------------------------------------

vpc = aws.ec2.Vpc(
    "fargate-vpc",
    cidr_block=SETTINGS.vpc_cidr,
    enable_dns_hostnames=True,
    enable_dns_support=True,
    tags={**TAGS, "Name": "ecs-fargate-autoscaling"},
)

igw = aws.ec2.InternetGateway(
    "fargate-igw",
    vpc_id=vpc.id,
    tags={**TAGS, "Name": "ecs-fargate-autoscaling-igw"},
)

pub_rt = aws.ec2.RouteTable(
    "fargate-pub-rt",
    vpc_id=vpc.id,
    routes=[aws.ec2.RouteTableRouteArgs(cidr_block="0.0.0.0/0", gateway_id=igw.id)],
    tags={**TAGS, "Name": "ecs-fargate-autoscaling-pub-rt"},
)

# /24 per AZ carved out of the VPC range
_subnet_cidrs = ipaddress.ip_network(SETTINGS.vpc_cidr).subnets(new_prefix=24)

public_subnets = []
route_table_associations = []
for zone, cidr in zip(SETTINGS.availability_zones, _subnet_cidrs):
    subnet = aws.ec2.Subnet(
        f"public-ecs-fargate-subnet-{zone}",
        vpc_id=vpc.id,
        cidr_block=str(cidr),
        availability_zone=zone,
        map_public_ip_on_launch=True,
        tags={**TAGS, "Name": f"public-ecs-fargate-subnet-{zone}"},
    )
    association = aws.ec2.RouteTableAssociation(
        f"fargate-rta-{zone}",
        subnet_id=subnet.id,
        route_table_id=pub_rt.id,
    )
    public_subnets.append(subnet)
    route_table_associations.append(association)

pulumi.log.debug(f"public subnets in {', '.join(SETTINGS.availability_zones)}")

# -- Security Groups ------------------------------------------------------------

# ALB: accepts 80 from anywhere
lb_sg = aws.ec2.SecurityGroup(
    "lbSg",
    vpc_id=vpc.id,
    description="Fargate ALB - HTTP from internet",
    ingress=[
        aws.ec2.SecurityGroupIngressArgs(protocol="tcp", from_port=80, to_port=80, cidr_blocks=["0.0.0.0/0"]),
    ],
    egress=[aws.ec2.SecurityGroupEgressArgs(protocol="-1", from_port=0, to_port=0, cidr_blocks=["0.0.0.0/0"])],
    tags={**TAGS, "Name": "ecs-fargate-autoscaling-lb-sg"},
)

# Tasks: container port from ALB only
task_sg = aws.ec2.SecurityGroup(
    "taskSg",
    vpc_id=vpc.id,
    description="Fargate tasks - from ALB only",
    ingress=[
        aws.ec2.SecurityGroupIngressArgs(protocol="tcp", from_port=PORT, to_port=PORT, security_groups=[lb_sg.id]),
    ],
    egress=[aws.ec2.SecurityGroupEgressArgs(protocol="-1", from_port=0, to_port=0, cidr_blocks=["0.0.0.0/0"])],
    tags={**TAGS, "Name": "ecs-fargate-autoscaling-task-sg"},
)

# -- ALB -----------------------------------------------------------------------

lb = aws.lb.LoadBalancer(
    "lb",
    internal=False,
    load_balancer_type="application",
    security_groups=[lb_sg.id],
    subnets=[s.id for s in public_subnets],
    tags={**TAGS, "Name": "ecs-fargate-autoscaling-alb"},
)

tg = aws.lb.TargetGroup(
    "tg",
    port=PORT,
    protocol="HTTP",
    target_type="ip",
    vpc_id=vpc.id,
    deregistration_delay=5,
    health_check=aws.lb.TargetGroupHealthCheckArgs(
        enabled=True,
        path=SETTINGS.health_check_path,
        port=str(PORT),
        protocol="HTTP",
        interval=30,
        timeout=5,
        healthy_threshold=5,
    ),
    tags={**TAGS, "Name": "ecs-fargate-autoscaling-tg"},
    opts=pulumi.ResourceOptions(depends_on=[lb]),
)

http_listener = aws.lb.Listener(
    "httpListener",
    load_balancer_arn=lb.arn,
    port=80,
    protocol="HTTP",
    default_actions=[aws.lb.ListenerDefaultActionArgs(type="forward", target_group_arn=tg.arn)],
)

# -- Exposed values -------------------------------------------------------------

vpc_id = vpc.id
public_subnet_ids = [s.id for s in public_subnets]
lb_dns_name = lb.dns_name
task_security_group_id = task_sg.id
target_group_arn = tg.arn
