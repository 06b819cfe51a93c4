"""
cloud-stacks
============
Pulumi programs, one subpackage each:

  fargate    ECS Fargate service behind an ALB with target tracking autoscaling (AWS)
  aks        AKS cluster + managed MySQL + storage account (Azure)
  webserver  single EC2 web server wrapped in a component resource (AWS)

Modules declare resources at import time, the way a Pulumi `__main__.py` does.
The project directories under stacks/ import them and export outputs.
"""
