#!/usr/bin/env python3
import aws_cdk as cdk

from pipeline_demo.pipeline_demo_stack import PipelineDemoStack

app = cdk.App()
PipelineDemoStack(
    app,
    "PipelineDemoStack",
    env=cdk.Environment(region="us-east-1"),
)

app.synth()
