from typing import List, Dict, Any, Optional
from pydantic import BaseModel, ConfigDict, Field
import litellm

from ..errors import ConfigurationError
from .models import Message, Role


class LLMClient(BaseModel):
    """
    Client for managing LLM interactions via LiteLLM.

    Holds the messages for the current request and forwards them, together
    with any extra provider parameters, to litellm.completion().
    """

    model_config = ConfigDict(arbitrary_types_allowed=True, extra='allow')

    model: str
    temperature: float = 1.0
    max_tokens: Optional[int] = None
    messages: List[Dict[str, str]] = Field(default_factory=list)

    @property
    def additional_params(self) -> Dict[str, Any]:
        """Get additional parameters passed during initialization."""
        # Pydantic stores extra fields in __pydantic_extra__
        return self.__pydantic_extra__ if hasattr(self, '__pydantic_extra__') and self.__pydantic_extra__ else {}

    def add_message(self, role: Role, content: str) -> None:
        """
        Add a message to the conversation history.

        Args:
            role: The role of the message sender ("system", "user", or "assistant")
            content: The message content
        """
        message = Message(role=role, content=content)
        self.messages.append(message.model_dump())

    def clear_messages(self) -> None:
        """Clear all messages from the conversation history."""
        self.messages = []

    def get_messages(self) -> List[Dict[str, str]]:
        """
        Get the current conversation history.

        Returns:
            List of message dictionaries in OpenAI format
        """
        return self.messages.copy()

    def check_environment(self) -> None:
        """
        Make sure credentials for the configured provider are available.

        An explicit api_key or api_base parameter is trusted as-is (self-hosted
        endpoints may need no key); otherwise LiteLLM is asked which environment
        variables the model's provider needs.

        Raises:
            ConfigurationError: If required keys are missing
        """
        params = self.additional_params
        if params.get("api_key") or params.get("api_base"):
            return

        env = litellm.validate_environment(model=self.model)
        if not env.get("keys_in_environment"):
            missing = ", ".join(env.get("missing_keys") or []) or "provider API key"
            raise ConfigurationError(
                f"Missing credentials for model '{self.model}': set {missing}"
            )

    def completion(self, **kwargs: Any) -> Any:
        """
        Generate a completion for the current messages.

        Args:
            **kwargs: Additional arguments to pass to litellm.completion()

        Returns:
            The completion response from LiteLLM
        """
        params = {
            "model": self.model,
            "messages": self.get_messages(),
            "temperature": self.temperature,
            **self.additional_params,
            **kwargs
        }

        if self.max_tokens is not None:
            params["max_tokens"] = self.max_tokens

        # If reasoning_effort is specified (OpenAI compatibility), allow it through
        if "reasoning_effort" in params:
            params.setdefault("allowed_openai_params", [])
            if "reasoning_effort" not in params["allowed_openai_params"]:
                params["allowed_openai_params"].append("reasoning_effort")

        return litellm.completion(**params)
