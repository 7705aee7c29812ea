"""
Builds Splash query parameters from typed request options.

Every value is rendered as a string: booleans as "1"/"0", numbers in their
decimal form. Options left unset are omitted from the mapping rather than
sent empty, so "not specified" stays distinguishable from "explicitly empty".
No range checks happen here; Splash validates values itself and reports
violations as an error response.
"""
from typing import Any, Dict, Mapping, Tuple, Type, TypeVar

from pydantic import BaseModel, ValidationError

from splash_client.core.exceptions import ParameterError
from splash_client.core.logger import get_logger
from splash_client.core.models import RenderOptions, ScriptOptions

logger = get_logger(__name__)

OptionsT = TypeVar("OptionsT", bound=BaseModel)

# Option fields whose Splash parameter name differs from the field name.
PARAM_NAMES: Dict[str, str] = {
    "base_url": "baseurl",
}

# Parameters owned by execute/run; script arguments may not reuse these names.
RESERVED_SCRIPT_PARAMS = frozenset({"lua_source", "timeout", "allowed_domains", "proxy", "filters"})

# Script argument values must be one of these; containers have no query-string form.
SCRIPT_ARG_TYPES = (str, int, float, bool)


def to_param_value(value: Any) -> str:
    """Renders a single option value the way Splash expects it."""
    # bool before numbers: bool is a subclass of int.
    if isinstance(value, bool):
        return "1" if value else "0"
    return str(value)


class ParameterBuilder:
    """
    Turns render and script options into flat `{name: str}` parameter mappings.

    The builder is stateless; one instance can be shared by any number of calls.
    """

    def make_options(self, options_cls: Type[OptionsT], **values: Any) -> OptionsT:
        """
        Validates keyword values into an options model.

        Raises:
            ParameterError: If a required value is missing or empty, a name is
                            unknown, or a value has the wrong type.
        """
        try:
            return options_cls(**values)
        except ValidationError as e:
            problems = "; ".join(
                f"{'.'.join(str(loc) for loc in err['loc']) or 'options'}: {err['msg']}"
                for err in e.errors()
            )
            logger.error(f"Invalid {options_cls.__name__}: {problems}")
            raise ParameterError(f"Invalid {options_cls.__name__}: {problems}")

    def render_params(self, options: RenderOptions) -> Dict[str, str]:
        """
        Builds the parameters for render.html, render.har or render.json.

        Fields are emitted in declaration order, so the shared render options come
        first and the endpoint-specific flags of `HarOptions`/`JsonOptions` follow.
        """
        params = self._collect(options, exclude=())
        logger.debug(f"Built {type(options).__name__} parameters: {sorted(params)}")
        return params

    def script_params(self, options: ScriptOptions) -> Dict[str, str]:
        """
        Builds the parameters for execute or run, merging in `lua_args`.

        Script arguments are rejected when their name matches a reserved script
        parameter, whether or not that parameter is set in this call.

        Raises:
            ParameterError: On a script argument name collision or a non-scalar value.
        """
        params = self._collect(options, exclude=("lua_args",))
        if options.lua_args:
            params = self.merge_script_args(params, options.lua_args)
        logger.debug(f"Built script parameters: {sorted(params)}")
        return params

    def merge_script_args(self, params: Mapping[str, str], lua_args: Mapping[str, Any]) -> Dict[str, str]:
        """
        Returns `params` with `lua_args` added.

        Raises:
            ParameterError: If a name is reserved or already present, or a value is
                            not a string, number or boolean.
        """
        collisions = sorted(
            name for name in lua_args if name in RESERVED_SCRIPT_PARAMS or name in params
        )
        if collisions:
            logger.error(f"Script arguments collide with reserved parameters: {collisions}")
            raise ParameterError(
                f"Script argument name(s) {', '.join(collisions)} collide with reserved parameters "
                f"({', '.join(sorted(RESERVED_SCRIPT_PARAMS))})."
            )
        non_scalar = sorted(
            str(name) for name, value in lua_args.items()
            if value is not None and not isinstance(value, SCRIPT_ARG_TYPES)
        )
        if non_scalar:
            logger.error(f"Script arguments with non-scalar values: {non_scalar}")
            raise ParameterError(
                f"Script argument(s) {', '.join(non_scalar)} must be a string, number or boolean."
            )
        merged = dict(params)
        for name, value in lua_args.items():
            if value is None:
                continue
            merged[str(name)] = to_param_value(value)
        return merged

    @staticmethod
    def _collect(options: BaseModel, exclude: Tuple[str, ...]) -> Dict[str, str]:
        params: Dict[str, str] = {}
        for field_name in type(options).model_fields:
            if field_name in exclude:
                continue
            value = getattr(options, field_name)
            if value is None:
                continue
            params[PARAM_NAMES.get(field_name, field_name)] = to_param_value(value)
        return params

