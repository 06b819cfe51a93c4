"""
Fargate IAM
===========
One role used as both the task execution role and the task role. It carries
the managed ECS execution policy plus the permissions ECS service autoscaling
needs, per
https://docs.aws.amazon.com/AmazonECS/latest/developerguide/service-auto-scaling.html#auto-scaling-IAM
"""

import json

import pulumi_aws as aws

from cloud_stacks.fargate import TAGS

SCALING_ACTIONS = [
    "application-autoscaling:*",
    "ecs:DescribeServices",
    "ecs:UpdateService",
    "cloudwatch:DescribeAlarms",
    "cloudwatch:PutMetricAlarm",
    "cloudwatch:DeleteAlarms",
    "cloudwatch:DescribeAlarmHistory",
    "cloudwatch:DescribeAlarmsForMetric",
    "cloudwatch:GetMetricStatistics",
    "cloudwatch:ListMetrics",
    "cloudwatch:DisableAlarmActions",
    "cloudwatch:EnableAlarmActions",
    "iam:CreateServiceLinkedRole",
    "sns:CreateTopic",
    "sns:Subscribe",
    "sns:Get*",
    "sns:List*",
]

ECS_TASK_EXECUTION_POLICY_ARN = "arn:aws:iam::aws:policy/service-role/AmazonECSTaskExecutionRolePolicy"

scaling_policy = aws.iam.Policy(
    "fargate-autoscalingpolicy",
    policy=json.dumps({
        "Version": "2012-10-17",
        "Statement": [{"Effect": "Allow", "Action": SCALING_ACTIONS, "Resource": "*"}],
    }),
    tags=TAGS,
)

role = aws.iam.Role(
    "fargate-role",
    assume_role_policy=json.dumps({
        "Version": "2012-10-17",
        "Statement": [{"Effect": "Allow", "Principal": {"Service": "ecs-tasks.amazonaws.com"}, "Action": "sts:AssumeRole"}],
    }),
    tags=TAGS,
)

exec_attachment = aws.iam.RolePolicyAttachment(
    "fargate-exec-rpa",
    role=role.name,
    policy_arn=ECS_TASK_EXECUTION_POLICY_ARN,
)

scaling_attachment = aws.iam.RolePolicyAttachment(
    "scalingRpa",
    role=role.name,
    policy_arn=scaling_policy.arn,
)

fargate_role_arn = role.arn
