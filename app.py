#!/usr/bin/env python3
import aws_cdk as cdk

from gamenight_backend.gamenight_backend_stack import GamenightBackendStack


app = cdk.App()
GamenightBackendStack(
    app,
    "GamenightBackendStack",
)

app.synth()
