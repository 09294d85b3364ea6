"""
Storefront GraphQL documents.

Field selections match the models in storefront.models.schema.
"""

IMAGE_FIELDS = """
    altText
    url
    width
    height
"""

PRICE_FIELDS = """
    amount
    currencyCode
"""

PRODUCT_FRAGMENT = f"""
fragment ProductFields on Product {{
    id
    title
    handle
    description
    descriptionHtml
    options {{
        name
        values
    }}
    featuredImage {{
        {IMAGE_FIELDS}
    }}
    images(first: 10) {{
        nodes {{
            {IMAGE_FIELDS}
        }}
    }}
    collections(first: 10) {{
        nodes {{
            id
            title
            handle
        }}
    }}
    variants(first: 100) {{
        nodes {{
            id
            title
            availableForSale
            selectedOptions {{
                name
                value
            }}
            price {{
                {PRICE_FIELDS}
            }}
        }}
    }}
}}
"""

CART_FRAGMENT = f"""
fragment CartFields on Cart {{
    id
    checkoutUrl
    totalQuantity
    cost {{
        subtotalAmount {{
            {PRICE_FIELDS}
        }}
    }}
    lines(first: 100) {{
        nodes {{
            id
            quantity
            cost {{
                amountPerQuantity {{
                    {PRICE_FIELDS}
                }}
                subtotalAmount {{
                    {PRICE_FIELDS}
                }}
                totalAmount {{
                    {PRICE_FIELDS}
                }}
            }}
            merchandise {{
                ... on ProductVariant {{
                    id
                    title
                    availableForSale
                    selectedOptions {{
                        name
                        value
                    }}
                    price {{
                        {PRICE_FIELDS}
                    }}
                    image {{
                        {IMAGE_FIELDS}
                    }}
                    product {{
                        id
                        title
                        handle
                        options {{
                            name
                            values
                        }}
                    }}
                }}
            }}
        }}
    }}
}}
"""

USER_ERROR_FIELDS = """
    userErrors {
        field
        message
    }
"""

PRODUCTS_QUERY = PRODUCT_FRAGMENT + """
query Products($first: Int!) {
    products(first: $first) {
        edges {
            node {
                ...ProductFields
            }
        }
    }
}
"""

PRODUCT_BY_HANDLE_QUERY = PRODUCT_FRAGMENT + """
query ProductByHandle($handle: String!) {
    product(handle: $handle) {
        ...ProductFields
    }
}
"""

COLLECTIONS_QUERY = """
query Collections($first: Int!) {
    collections(first: $first) {
        nodes {
            id
            title
            handle
        }
    }
}
"""

CREATE_CART_MUTATION = CART_FRAGMENT + """
mutation CreateCart($id: ID!, $quantity: Int!) {
    cartCreate(input: { lines: [{ merchandiseId: $id, quantity: $quantity }] }) {
        cart {
            ...CartFields
        }
""" + USER_ERROR_FIELDS + """
    }
}
"""

ADD_CART_LINES_MUTATION = CART_FRAGMENT + """
mutation AddCartLines($cartId: ID!, $merchandiseId: ID!, $quantity: Int!) {
    cartLinesAdd(cartId: $cartId, lines: [{ merchandiseId: $merchandiseId, quantity: $quantity }]) {
        cart {
            ...CartFields
        }
""" + USER_ERROR_FIELDS + """
    }
}
"""

REMOVE_CART_LINES_MUTATION = CART_FRAGMENT + """
mutation RemoveCartLines($cartId: ID!, $lineIds: [ID!]!) {
    cartLinesRemove(cartId: $cartId, lineIds: $lineIds) {
        cart {
            ...CartFields
        }
""" + USER_ERROR_FIELDS + """
    }
}
"""

GET_CART_QUERY = CART_FRAGMENT + """
query GetCart($id: ID!) {
    cart(id: $id) {
        ...CartFields
    }
}
"""
