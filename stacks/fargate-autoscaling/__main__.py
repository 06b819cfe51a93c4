"""
Fargate Autoscaling
===================
ECS Fargate + ALB + ECR image, scaled 1..5 tasks on memory (80%) and CPU (60%).

  cloud_stacks.fargate.networking  VPC, security groups, ALB, target group
  cloud_stacks.fargate.iam         execution/task role with autoscaling permissions
  cloud_stacks.fargate.service     image, cluster, task definition, service, scaling
"""

import pulumi

from cloud_stacks.fargate import networking, service

# -- Outputs -------------------------------------------------------------------

pulumi.export("lbDns",       networking.lb_dns_name)
pulumi.export("vpcId",       networking.vpc_id)
pulumi.export("ecsCluster",  service.cluster.name)
pulumi.export("imageUri",    service.image.image_uri)
