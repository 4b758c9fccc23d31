"""CLI Commands"""

import os

from commitsense.config import load_config, get_config_path
from commitsense.llm.completions import API_KEY_ENV
from commitsense.output import bold, dim, info, success, warning


def display_config() -> int:
    """Display current configuration."""
    config = load_config()
    config_path = get_config_path()

    print(f"\n{bold('Current Configuration')}\n")

    if config_path:
        print(f"  {dim('Loaded from:')} {config_path}")
    else:
        print(f"  {dim('Loaded from:')} defaults (no .commitsenserc found)")

    key_state = success('set') if os.environ.get(API_KEY_ENV) else warning('missing')
    print(f"  {dim('Credential:')} {API_KEY_ENV} {key_state}")

    print()
    print(f"  {bold('Settings:')}")
    print(f"    model:      {info(config.model)}")
    print(f"    max_tokens: {info(str(config.max_tokens))}")
    print(f"    endpoint:   {info(config.endpoint)}")
    print(f"    timeout:    {info(str(config.timeout) if config.timeout else 'transport default')}")

    print(f"\n  {dim('Config locations:')}")
    print(f"    Local:  .commitsenserc (in current directory)")
    print(f"    Global: ~/.commitsenserc\n")

    return 0
