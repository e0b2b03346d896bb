""" All Application Constants declare here... """

# Python Packages
from decouple import config


# App Constants
APP_ENV                         =   config('APP_ENV', default = 'development')
APP_TIMEZONE                    =   config('APP_TIMEZONE', default = 'UTC')
LOG_LEVEL                       =   config('LOG_LEVEL', default = 'INFO')


# Swagger Constants
SWAGGER_APP_PROPS       =   {
                                "name": "Vector Search",
                                "version": "1.0",
                                "description": "Answers questions about project \
                                documentation by retrieving relevant sections \
                                and asking a language model."
                            }


# Database Constants
DB_HOST                         =   config('DB_HOST', default = 'localhost')
DB_PORT                         =   config('DB_PORT', default = '5432')
DB_NAME                         =   config('DB_NAME', default = 'postgres')
DB_USER                         =   config('DB_USER', default = 'postgres')
DB_PASSWORD                     =   config('DB_PASSWORD', default = '')
DB_SCHEMA                       =   config('DB_SCHEMA', default = 'docs')
STORE_TIMEOUT                   =   config('STORE_TIMEOUT', default = 10000, cast = int) # ms


# Provider Selection
AI_PROVIDER                     =   config('AI_PROVIDER', default = 'openai')
PROVIDER_TIMEOUT                =   config('PROVIDER_TIMEOUT', default = 30.0, cast = float) # seconds
PROVIDER_MAX_RETRIES            =   config('PROVIDER_MAX_RETRIES', default = 1, cast = int)


# OpenAI Constants
OPENAI_API_KEY		            =	config('OPENAI_API_KEY', default = '')
OPENAI_CHAT_MODEL               =   config('OPENAI_CHAT_MODEL', default = 'gpt-3.5-turbo-0125')
OPENAI_EMBEDDING_MODEL          =	config('OPENAI_EMBEDDING_MODEL', default = 'text-embedding-ada-002')
EMBEDDING_DIMENSION             =   1536


# Anthropic Constants
ANTHROPIC_API_KEY               =   config('ANTHROPIC_API_KEY', default = '')
ANTHROPIC_DEFAULT_MODEL         =   config('ANTHROPIC_DEFAULT_MODEL', default = 'claude-3-5-haiku-latest')
