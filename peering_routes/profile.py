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


""" Selection of the AWS named profile used to build boto3 sessions.

    The shell version of this toggle exported AWS_PROFILE into the caller's
    environment. Here the profile is passed explicitly to the session, and the
    environment helpers operate on whatever mapping they are given. Run as a
    module, it prints the shell command that applies the change, for use with
    `eval "$(python -m peering_routes.profile NAME)"`.
    """

import argparse
import os
import shlex
import sys

import boto3


PROFILE_VAR = "AWS_PROFILE"
OFF = "off"


def current(environ):
    return environ.get(PROFILE_VAR) or None


def describe(environ):
    return f"Current profile: {current(environ) or 'default (none explicitly set)'}"


def select(name, environ):
    """ Sets, clears, or reports the profile held in the provided environment
        and returns the message to display. With no name the environment is
        left alone and usage is returned.
        """
    if not name:
        return f"Usage: aws_profile <profile_name> or aws_profile {OFF}\n{describe(environ)}"
    elif name == OFF:
        environ.pop(PROFILE_VAR, None)
        return "AWS profile cleared. The 'default' profile will be used."
    else:
        environ[PROFILE_VAR] = name
        return f"AWS profile set to: {name}"


def shell_command(name):
    if not name:
        return None
    elif name == OFF:
        return f"unset {PROFILE_VAR}"
    else:
        return f"export {PROFILE_VAR}={shlex.quote(name)}"


def session(profile_name=None, region=None):
    """ Builds a boto3 session for the given profile and region. A profile of
        None or "off" uses boto3's default credential chain.
        """
    if profile_name == OFF:
        profile_name = None
    return boto3.Session(profile_name=profile_name, region_name=region)


if __name__ == "__main__":
    arg_parser = argparse.ArgumentParser(description="Shows, selects, or clears the AWS profile")
    arg_parser.add_argument("name",
                            metavar="PROFILE_NAME",
                            nargs="?",
                            help="""The profile to select, or "off" to return to the default profile.
                                    If omitted, shows the current profile.
                                    """)
    args = arg_parser.parse_args()
    # messages go to the terminal so that stdout can be passed to eval
    print(select(args.name, dict(os.environ)), file=sys.stderr)
    command = shell_command(args.name)
    if command:
        print(command)
