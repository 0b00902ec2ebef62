"""Built-in prompt set written on first start.

Keys are ``category/name`` ids; files are only created when absent, so a
customized default is never overwritten.
"""

DEFAULT_PROMPTS = {
    "frontend/react-pro": """# REACT PRO

## ESTRUTURA
src/
├── components/ui/
├── hooks/
├── services/
└── contexts/

## REGRAS
- useMemo para cálculos pesados
- useCallback para funções em props
- React.memo com critério

## SEGURANÇA
- Sanitize inputs com DOMPurify
- NUNCA dangerouslySetInnerHTML sem sanitizar
""",

    "backend/nodejs-api": """# NODEJS API PRO

## ARQUITETURA
src/
├── controllers/
├── services/
├── repositories/
└── middlewares/

## SEGURANÇA
1. Validação Zod
2. Rate limiting
3. Helmet headers
4. CORS configurado
5. SQL injection prevention
""",

    "security/auth-patterns": """# AUTH PATTERNS

## JWT
- Access token: 15min
- Refresh token: 7d
- bcrypt: 12 rounds

## PROTEÇÕES
- Rate limiting em auth
- Brute force protection
- Password strength regex
""",

    "database/postgres-pro": """# POSTGRES PRO

## BOAS PRÁTICAS
- Use migrations
- Repository pattern
- Prepared statements
- Índices estratégicos
- RLS (Row Level Security)
""",

    "devops/docker-pro": """# DOCKER PRO

## MULTI-STAGE
1. Builder: compila
2. Production: imagem final

## SEGURANÇA
- Non-root user
- Secrets em env vars
- Image scanning
""",
}
