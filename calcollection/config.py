"""
Configuration of the calendar collection provider.

A config file is a json (or, if pyyaml is installed, yaml) dict of
sections.  A section may "inherits" another section.
"""
import codecs
import json
import logging
import os
from dataclasses import dataclass
from dataclasses import fields

from calcollection.lib.vcal import DEFAULT_PRODUCT_ID

log = logging.getLogger("calcollection")


def config_section(config, section="default"):
    if section in config and "inherits" in config[section]:
        ret = config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def read_config(fn):
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config/"
        for config_file in (
            f"{cfgdir}/calcollection/provider.conf",
            f"{cfgdir}/calcollection/provider.yaml",
            f"{cfgdir}/calcollection/provider.json",
            "/etc/calcollection/provider.conf",
        ):
            cfg = read_config(config_file)
            if cfg:
                return cfg
        return None

    try:
        try:
            with open(fn, "rb") as config_file:
                return json.load(config_file)
        except json.decoder.JSONDecodeError:
            ## yaml is optional, and not in the requirements
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.load(config_file, yaml.SafeLoader)
                except yaml.YAMLError:
                    log.error(
                        f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax."
                    )
            except ImportError:
                log.error(
                    f"config file {fn} exists but is not valid json, and pyyaml is not installed."
                )

    except FileNotFoundError:
        log.info(f"no config file found at {fn}")
    except ValueError:
        log.error("error in config file.  It will be ignored", exc_info=True)
    return {}


@dataclass(frozen=True)
class ProviderConfig:
    """
    Settings of CalendarCollectionProvider.

    Attributes:
        product_id: PRODID of calendars rendered from collections
        default_charset: charset of text/calendar responses
    """

    product_id: str = DEFAULT_PRODUCT_ID
    default_charset: str = "utf-8"

    def __post_init__(self) -> None:
        try:
            codecs.lookup(self.default_charset)
        except LookupError as e:
            raise ValueError(f"unknown charset {self.default_charset}") from e

    @classmethod
    def from_dict(cls, section: dict) -> "ProviderConfig":
        known = {f.name for f in fields(cls)}
        for key in section:
            if key not in known and key != "inherits":
                log.debug(f"ignoring unknown provider setting {key}")
        return cls(**{k: v for (k, v) in section.items() if k in known})


def load_provider_config(fn=None, section="default") -> ProviderConfig:
    """
    ProviderConfig from section of the config file fn (or the first
    config file found in the default locations).  Defaults if there is
    no config.
    """
    config = read_config(fn)
    if not config:
        return ProviderConfig()
    return ProviderConfig.from_dict(config_section(config, section))
