import logging
import subprocess
from pathlib import Path

import jsii
from aws_cdk import BundlingOptions, ILocalBundling
from aws_cdk import aws_lambda as _lambda
from constructs import Construct

logger = logging.getLogger(__name__)

LAYER_SOURCE_PATH = "layers/common_layer"


@jsii.implements(ILocalBundling)
class PythonLocalBundling:
    """ローカル環境で依存ライブラリをインストールするBundlingクラス

    uv → pip の順に試し、どちらも使えない場合は Docker バンドリングに任せる。
    """

    def __init__(self, source_path: str) -> None:
        self.source_path = source_path

    def try_bundle(self, output_dir: str, options: BundlingOptions) -> bool:
        """ローカルでバンドリングを試行する。

        Returns:
            True: バンドリング成功（Dockerをスキップ）
            False: バンドリング失敗（Dockerにフォールバック）
        """
        del options  # unused
        requirements_path = Path(self.source_path) / "requirements.txt"
        target_dir = Path(output_dir) / "python"

        if not requirements_path.exists():
            logger.warning("requirements.txt not found: %s", requirements_path)
            return False

        for command in self._install_commands(requirements_path, target_dir):
            if self._run(command):
                return True

        logger.warning("Local bundling failed, falling back to Docker")
        return False

    @staticmethod
    def _install_commands(
        requirements_path: Path, target_dir: Path
    ) -> list[list[str]]:
        requirements = ["-r", str(requirements_path)]
        target = str(target_dir)
        return [
            ["uv", "pip", "install", *requirements, "--target", target, "--quiet"],
            ["pip", "install", *requirements, "-t", target, "--quiet"],
        ]

    @staticmethod
    def _run(command: list[str]) -> bool:
        tool = command[0]
        try:
            logger.info("Trying local bundling with %s...", tool)
            subprocess.run(command, check=True)
        except FileNotFoundError:
            logger.debug("%s not found", tool)
            return False
        except subprocess.CalledProcessError as e:
            logger.debug("%s install failed: %s", tool, e)
            return False
        logger.info("Local bundling with %s succeeded", tool)
        return True


class Layers(Construct):
    """Lambda Layers Construct

    Powertools / pydantic などハンドラー共通の依存ライブラリをまとめる。
    """

    def __init__(self, scope: Construct, id: str) -> None:
        super().__init__(scope, id)

        self.common_layer = _lambda.LayerVersion(
            self,
            "CommonLayer",
            code=_lambda.Code.from_asset(
                LAYER_SOURCE_PATH,
                bundling=BundlingOptions(
                    image=_lambda.Runtime.PYTHON_3_14.bundling_image,
                    command=[
                        "bash",
                        "-c",
                        "pip install -r requirements.txt -t /asset-output/python",
                    ],
                    local=PythonLocalBundling(LAYER_SOURCE_PATH),
                ),
            ),
            compatible_runtimes=[_lambda.Runtime.PYTHON_3_14],
            description="Hotel booking common dependencies",
        )
