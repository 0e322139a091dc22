# Copyright 2023, Chariot Solutions
# 
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
# 
#     http://www.apache.org/licenses/LICENSE-2.0
# 
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.


import os
import pytest

from unittest.mock import patch

from peering_routes import profile


def test_select_sets_profile():
    environ = {}
    assert profile.select("networking", environ) == "AWS profile set to: networking"
    assert environ == {"AWS_PROFILE": "networking"}
    assert profile.current(environ) == "networking"


def test_select_off_clears_profile():
    environ = {"AWS_PROFILE": "networking"}
    assert profile.select("off", environ) == "AWS profile cleared. The 'default' profile will be used."
    assert environ == {}
    assert profile.current(environ) is None


def test_select_off_without_profile():
    environ = {}
    profile.select("off", environ)
    assert environ == {}


def test_select_without_name_reports_current():
    environ = {"AWS_PROFILE": "networking"}
    message = profile.select(None, environ)
    assert message.startswith("Usage: aws_profile <profile_name> or aws_profile off")
    assert message.endswith("Current profile: networking")
    assert environ == {"AWS_PROFILE": "networking"}


def test_describe_default():
    assert profile.describe({}) == "Current profile: default (none explicitly set)"


def test_shell_command():
    assert profile.shell_command("networking") == "export AWS_PROFILE=networking"
    assert profile.shell_command("my profile") == "export AWS_PROFILE='my profile'"
    assert profile.shell_command("off") == "unset AWS_PROFILE"
    assert profile.shell_command(None) is None


def test_session_passes_profile_explicitly():
    with patch("peering_routes.profile.boto3.Session") as session:
        profile.session("networking", "eu-west-1")
        session.assert_called_once_with(profile_name="networking", region_name="eu-west-1")


def test_session_off_uses_default_chain():
    with patch("peering_routes.profile.boto3.Session") as session:
        profile.session("off", "us-east-1")
        session.assert_called_once_with(profile_name=None, region_name="us-east-1")


def test_select_requires_environment(monkeypatch):
    monkeypatch.delenv("AWS_PROFILE", raising=False)
    with pytest.raises(TypeError):
        profile.select("networking")
    assert "AWS_PROFILE" not in os.environ
