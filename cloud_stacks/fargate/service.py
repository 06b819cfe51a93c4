"""
Fargate service
===============
Image build + push (ECR), ECS cluster, task definition, service attached to
the ALB target group, and two target tracking policies (memory 80%, CPU 60%)
on a 1..5 task scalable target.
"""

import json

import pulumi
import pulumi_aws as aws
import pulumi_awsx as awsx

from cloud_stacks.fargate import SETTINGS, TAGS, iam, networking

CONTAINER_NAME = "app"

# -- Image ----------------------------------------------------------------------

repo = awsx.ecr.Repository(
    "repo",
    force_delete=True,
    tags=TAGS,
)

pulumi.log.info(f"building app image from {SETTINGS.app_path}")

image = awsx.ecr.Image(
    "app-image",
    repository_url=repo.url,
    context=SETTINGS.app_path,
    platform="linux/amd64",
)

# -- Logs + Cluster -------------------------------------------------------------

log_group = aws.cloudwatch.LogGroup(
    "fargate-loggroup",
    retention_in_days=SETTINGS.log_retention_days,
    tags=TAGS,
)

cluster = aws.ecs.Cluster(
    "fargate-autoscaling",
    tags={**TAGS, "Name": "fargate-autoscaling"},
)

# -- Task Definition ------------------------------------------------------------


def container_definitions(image_uri, log_group_name, region=SETTINGS.region, port=SETTINGS.container_port):
    """JSON container definitions for the single app container."""
    return json.dumps([
        {
            "name": CONTAINER_NAME,
            "image": image_uri,
            "portMappings": [{"containerPort": port, "protocol": "tcp"}],
            "logConfiguration": {
                "logDriver": "awslogs",
                "options": {
                    "awslogs-create-group":  "true",
                    "awslogs-group":         log_group_name,
                    "awslogs-region":        region,
                    "awslogs-stream-prefix": CONTAINER_NAME,
                },
            },
        }
    ])


app_td = aws.ecs.TaskDefinition(
    "appdemoTd",
    family="app-demo",
    cpu=SETTINGS.cpu,
    memory=SETTINGS.memory,
    network_mode="awsvpc",
    requires_compatibilities=["FARGATE"],
    execution_role_arn=iam.fargate_role_arn,
    task_role_arn=iam.fargate_role_arn,
    container_definitions=pulumi.Output.all(
        image_uri=image.image_uri,
        log_group_name=log_group.name,
    ).apply(lambda args: container_definitions(args["image_uri"], args["log_group_name"])),
    tags={**TAGS, "Name": "app-demo"},
)

# -- ECS Service ----------------------------------------------------------------

fargate_service = aws.ecs.Service(
    "appdemoService",
    cluster=cluster.arn,
    desired_count=SETTINGS.desired_count,
    launch_type="FARGATE",
    task_definition=app_td.arn,
    network_configuration=aws.ecs.ServiceNetworkConfigurationArgs(
        assign_public_ip=True,
        subnets=networking.public_subnet_ids,
        security_groups=[networking.task_security_group_id],
    ),
    load_balancers=[aws.ecs.ServiceLoadBalancerArgs(
        target_group_arn=networking.target_group_arn,
        container_name=CONTAINER_NAME,
        container_port=SETTINGS.container_port,
    )],
    deployment_maximum_percent=200,
    deployment_minimum_healthy_percent=100,
    tags={**TAGS, "Name": "app-demo-service"},
    opts=pulumi.ResourceOptions(depends_on=[networking.http_listener]),
)

# -- Autoscaling ----------------------------------------------------------------

autoscaling_target = aws.appautoscaling.Target(
    "appScalingTarget",
    max_capacity=SETTINGS.max_capacity,
    min_capacity=SETTINGS.min_capacity,
    resource_id=pulumi.Output.concat("service/", cluster.name, "/", fargate_service.name),
    scalable_dimension="ecs:service:DesiredCount",
    service_namespace="ecs",
)


def target_tracking_policy(name, metric_type, target_value):
    return aws.appautoscaling.Policy(
        name,
        policy_type="TargetTrackingScaling",
        resource_id=autoscaling_target.resource_id,
        scalable_dimension=autoscaling_target.scalable_dimension,
        service_namespace=autoscaling_target.service_namespace,
        target_tracking_scaling_policy_configuration=aws.appautoscaling.PolicyTargetTrackingScalingPolicyConfigurationArgs(
            predefined_metric_specification=aws.appautoscaling.PolicyTargetTrackingScalingPolicyConfigurationPredefinedMetricSpecificationArgs(
                predefined_metric_type=metric_type,
            ),
            target_value=target_value,
        ),
    )


memory_policy = target_tracking_policy("memoryASPolicy", "ECSServiceAverageMemoryUtilization", SETTINGS.memory_target)
cpu_policy    = target_tracking_policy("cpuASPolicy",    "ECSServiceAverageCPUUtilization",    SETTINGS.cpu_target)
