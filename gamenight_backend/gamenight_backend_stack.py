from aws_cdk import (
    Stack,
    Duration,
    CfnOutput,
    aws_lambda as _lambda,
    aws_apigateway as apigateway,
)
from constructs import Construct
from config import Config


class GamenightBackendStack(Stack):

    def __init__(self, scope: Construct, construct_id: str, **kwargs) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Load config
        config = Config()

        function_environment = {"LOG_LEVEL": config.log_level}

        # Greeting lambda function
        gamenight_function = _lambda.Function(
            self,
            "GamenightFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="index.lambda_handler",
            code=_lambda.Code.from_asset("src/gamenight_function"),
            timeout=Duration.seconds(2),
            environment=function_environment,
        )

        # Greeting with timestamp lambda function
        hello_function = _lambda.Function(
            self,
            "HelloFunction",
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="index.lambda_handler",
            code=_lambda.Code.from_asset("src/hello_function"),
            timeout=Duration.seconds(2),
            environment=function_environment,
        )

        # API endpoint
        rest_api = apigateway.RestApi(
            self,
            "GamenightApi",
            rest_api_name="GamenightApi",
            description="GameNight backend API",
            endpoint_types=[apigateway.EndpointType.REGIONAL],
            deploy_options=apigateway.StageOptions(
                stage_name=config.api_stage_name,
            ),
            default_cors_preflight_options=apigateway.CorsOptions(
                allow_origins=apigateway.Cors.ALL_ORIGINS,
                allow_methods=apigateway.Cors.ALL_METHODS,
            ),
        )

        # add method to /gamenight api
        rest_api.root.add_resource("gamenight").add_method(
            "GET",
            apigateway.LambdaIntegration(gamenight_function, proxy=True),
            method_responses=[apigateway.MethodResponse(status_code="200")],
        )

        # add method to /hello api
        rest_api.root.add_resource("hello").add_method(
            "GET",
            apigateway.LambdaIntegration(hello_function, proxy=True),
            method_responses=[apigateway.MethodResponse(status_code="200")],
        )

        # Output
        CfnOutput(self, "ApiUrl", value=rest_api.url)
