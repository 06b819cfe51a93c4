"""ECS Fargate service with CPU + memory target tracking autoscaling."""

import pulumi

from cloud_stacks.config import FargateSettings, base_tags

SETTINGS = FargateSettings.from_config(pulumi.Config())

# -- Tags applied to every resource --------------------------------------------
TAGS = base_tags(pulumi.get_project(), pulumi.get_stack())
