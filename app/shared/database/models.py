from sqlalchemy import Column, Integer, String, Float, ForeignKey
from sqlalchemy.orm import relationship
from app.config.database import Base

# ===== UBICACIÓN Y TERCEROS =====

class Locality(Base):
    """Modelo de Localidad"""
    __tablename__ = "localities"

    id = Column(Integer, primary_key=True, index=True)
    postal_code = Column(Integer, unique=True, nullable=False, index=True)
    locality_name = Column(String(255), nullable=False)
    province_name = Column(String(255), nullable=False)
    country_name = Column(String(255), nullable=False)

    # Relationships
    sellers = relationship("Seller", back_populates="locality")

class Seller(Base):
    """Modelo de Vendedor"""
    __tablename__ = "sellers"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(Integer, unique=True, nullable=False)
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(50), nullable=False)
    locality_id = Column(Integer, ForeignKey("localities.id"), nullable=False)

    # Relationships
    locality = relationship("Locality", back_populates="sellers")

class Carry(Base):
    """Modelo de Transportista - locality_id referencia localities.postal_code"""
    __tablename__ = "carries"

    id = Column(Integer, primary_key=True, index=True)
    cid = Column(String(255), unique=True, nullable=False)
    company_name = Column(String(255), nullable=False)
    address = Column(String(255), nullable=False)
    telephone = Column(String(50), nullable=False)
    locality_id = Column(Integer, nullable=False, index=True)

# ===== PRODUCTOS =====

class Product(Base):
    """Modelo de Producto"""
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    description = Column(String(255), nullable=False)
    expiration_rate = Column(Float, nullable=False)
    freezing_rate = Column(Float, nullable=False)
    height = Column(Float, nullable=False)
    length = Column(Float, nullable=False)
    netweight = Column(Float, nullable=False)
    product_code = Column(String(100), unique=True, nullable=False, index=True)
    recommended_freezing_temperature = Column(Float, nullable=False)
    width = Column(Float, nullable=False)
    product_type_id = Column(Integer, nullable=False)
    seller_id = Column(Integer)

    # Relationships
    records = relationship("ProductRecord", back_populates="product")

class ProductRecord(Base):
    """Registro de precios de un producto"""
    __tablename__ = "product_records"

    id = Column(Integer, primary_key=True, index=True)
    last_update_date = Column(String(10), nullable=False)
    purchase_price = Column(Float, nullable=False)
    sale_price = Column(Float, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)

    # Relationships
    product = relationship("Product", back_populates="records")

# ===== BODEGAS =====

class Warehouse(Base):
    """Modelo de Bodega"""
    __tablename__ = "warehouses"

    id = Column(Integer, primary_key=True, index=True)
    address = Column(String(255), nullable=False)
    telephone = Column(String(50), nullable=False)
    warehouse_code = Column(String(50), unique=True, nullable=False)
    minimum_capacity = Column(Integer, nullable=False)
    minimum_temperature = Column(Integer, nullable=False)

class Section(Base):
    """Modelo de Sección de bodega"""
    __tablename__ = "sections"

    id = Column(Integer, primary_key=True, index=True)
    section_number = Column(Integer, unique=True, nullable=False)
    current_temperature = Column(Integer, nullable=False)
    minimum_temperature = Column(Integer, nullable=False)
    current_capacity = Column(Integer, nullable=False)
    minimum_capacity = Column(Integer, nullable=False)
    maximum_capacity = Column(Integer, nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)
    product_type_id = Column(Integer, nullable=False)

    # Relationships
    batches = relationship("ProductBatch", back_populates="section", cascade="all, delete-orphan")

class ProductBatch(Base):
    """Modelo de Lote de producto"""
    __tablename__ = "product_batches"

    id = Column(Integer, primary_key=True, index=True)
    batch_number = Column(Integer, unique=True, nullable=False)
    current_quantity = Column(Integer, nullable=False)
    current_temperature = Column(Integer, nullable=False)
    due_date = Column(String(10), nullable=False)
    initial_quantity = Column(Integer, nullable=False)
    manufacturing_date = Column(String(10), nullable=False)
    manufacturing_hour = Column(Integer, nullable=False)
    minimum_temperature = Column(Integer, nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    section_id = Column(Integer, ForeignKey("sections.id"), nullable=False)

    # Relationships
    section = relationship("Section", back_populates="batches")

class Employee(Base):
    """Modelo de Empleado de bodega"""
    __tablename__ = "employees"

    id = Column(Integer, primary_key=True, index=True)
    card_number_id = Column(String(50), unique=True, nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)

class InboundOrder(Base):
    """Orden de entrada de mercancía"""
    __tablename__ = "inbound_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_date = Column(String(10), nullable=False)
    order_number = Column(String(255), unique=True, nullable=False)
    employee_id = Column(Integer, ForeignKey("employees.id"), nullable=False)
    product_batch_id = Column(Integer, ForeignKey("product_batches.id"), nullable=False)
    warehouse_id = Column(Integer, ForeignKey("warehouses.id"), nullable=False)

# ===== COMPRAS =====

class Buyer(Base):
    """Modelo de Comprador"""
    __tablename__ = "buyers"

    id = Column(Integer, primary_key=True, index=True)
    card_number_id = Column(String(50), unique=True, nullable=False)
    first_name = Column(String(255), nullable=False)
    last_name = Column(String(255), nullable=False)

class PurchaseOrder(Base):
    """Orden de compra"""
    __tablename__ = "purchase_orders"

    id = Column(Integer, primary_key=True, index=True)
    order_number = Column(String(255), nullable=False)
    order_date = Column(String(10), nullable=False)
    tracking_code = Column(String(255), nullable=False)
    buyer_id = Column(Integer, ForeignKey("buyers.id"), nullable=False)
    product_record_id = Column(Integer, ForeignKey("product_records.id"), nullable=False)
    order_status_id = Column(Integer, nullable=False)
