"""Sample catalog used to seed an empty store"""

SAMPLE_PRODUCTS = [
    {
        "name": "Classic White T-Shirt",
        "description": "Premium cotton t-shirt with a comfortable fit",
        "price": 29.99,
        "category": "T-Shirts",
        "image": "https://images.unsplash.com/photo-1521572163474-6864f9cf17ab?w=500",
        "stock": 50,
        "sizes": ["S", "M", "L", "XL"],
        "colors": ["White"],
    },
    {
        "name": "Denim Jeans",
        "description": "High-quality denim jeans with perfect fit",
        "price": 79.99,
        "category": "Jeans",
        "image": "https://images.unsplash.com/photo-1542272604-787c3835535d?w=500",
        "stock": 30,
        "sizes": ["30", "32", "34", "36"],
        "colors": ["Blue", "Black"],
    },
    {
        "name": "Casual Hoodie",
        "description": "Warm and comfortable hoodie for everyday wear",
        "price": 59.99,
        "category": "Hoodies",
        "image": "https://images.unsplash.com/photo-1556821840-3a63f95609a7?w=500",
        "stock": 25,
        "sizes": ["M", "L", "XL"],
        "colors": ["Grey", "Navy"],
    },
    {
        "name": "Formal Shirt",
        "description": "Elegant formal shirt for professional occasions",
        "price": 89.99,
        "category": "Shirts",
        "image": "https://images.unsplash.com/photo-1596755094514-f87e34085b2c?w=500",
        "stock": 20,
        "sizes": ["S", "M", "L"],
        "colors": ["White", "Light Blue"],
    },
    {
        "name": "Summer Dress",
        "description": "Beautiful summer dress with floral pattern",
        "price": 69.99,
        "category": "Dresses",
        "image": "https://images.unsplash.com/photo-1515372039744-b8f02a3ae446?w=500",
        "stock": 15,
        "sizes": ["XS", "S", "M"],
        "colors": ["Floral"],
    },
    {
        "name": "Sneakers",
        "description": "Comfortable sneakers for daily use",
        "price": 99.99,
        "category": "Shoes",
        "image": "https://images.unsplash.com/photo-1549298916-b41d501d3772?w=500",
        "stock": 40,
        "sizes": ["7", "8", "9", "10", "11"],
        "colors": ["White", "Black"],
    },
]
