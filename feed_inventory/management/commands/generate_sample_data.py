"""
Django Management Command: Generate Sample Data

Creates a small demo feedlot:
- Pens and an active herd
- Feed items with entry/exit movements (through the ledger)
- Per-animal and general costs for the current month
- One recorded sale

Usage:
    python manage.py generate_sample_data
    python manage.py generate_sample_data --clear  # Clear existing data first
"""

from datetime import timedelta
from decimal import Decimal
import random

from django.core.management.base import BaseCommand, CommandError
from django.db import DatabaseError, transaction
from django.utils import timezone

from accounts.models import User
from expenses.models import Cost, CostCategory
from feed_inventory.models import Food, StockMovement
from feed_inventory.services import record_movement
from herd_management.models import Animal, Pen
from sales_revenue.models import CashFlowEntry, Sale
from sales_revenue.services import record_sale

BREEDS = ['Nelore', 'Angus', 'Brahman', 'Senepol', 'Tabapuã']

FOODS = [
    # name, unit, min_stock, unit_cost
    ('Corn silage', 'kg', Decimal('2000'), Decimal('0.45')),
    ('Soybean meal', 'kg', Decimal('500'), Decimal('2.80')),
    ('Mineral salt', 'kg', Decimal('100'), Decimal('3.10')),
]


class Command(BaseCommand):
    help = 'Generate sample feedlot data (pens, animals, feed, costs and a sale)'

    def add_arguments(self, parser):
        parser.add_argument(
            '--clear',
            action='store_true',
            help='Clear existing sample data before generating new data',
        )
        parser.add_argument(
            '--animals',
            type=int,
            default=12,
            help='Number of animals to register (default: 12)',
        )
        parser.add_argument('--seed', type=int, help='Random seed for repeatable data')

    def handle(self, *args, **options):
        if options['animals'] < 1:
            raise CommandError('--animals must be at least 1')
        random.seed(options.get('seed'))

        self.stdout.write(self.style.SUCCESS('\n' + '=' * 60))
        self.stdout.write(self.style.SUCCESS('  SAMPLE DATA GENERATION'))
        self.stdout.write(self.style.SUCCESS('=' * 60 + '\n'))

        if options['clear']:
            self.clear_data()

        try:
            with transaction.atomic():
                user = self.get_user()
                pens = self.create_pens()
                animals = self.create_animals(pens, options['animals'], user)
                foods = self.create_foods(user)
                costs = self.create_costs(animals, user)
                sale = record_sale(
                    animals[-1].id, 'Frigorífico Demo', price=Decimal('5200.00'), actor=user
                )
        except DatabaseError as e:
            raise CommandError(f'Data generation failed: {e}')

        self.stdout.write(f'  Pens:      {len(pens)}')
        self.stdout.write(f'  Animals:   {len(animals)}')
        self.stdout.write(f'  Foods:     {len(foods)}')
        self.stdout.write(f'  Costs:     {len(costs)}')
        self.stdout.write(f'  Sale:      {sale.animal.tag} -> {sale.buyer_name}')
        self.stdout.write(self.style.SUCCESS('\nSample data generated successfully!\n'))

    def clear_data(self):
        self.stdout.write(self.style.WARNING('Clearing existing data...'))
        with transaction.atomic():
            Sale.objects.all().delete()
            CashFlowEntry.objects.all().delete()
            Cost.objects.all().delete()
            StockMovement.objects.all().delete()
            Food.objects.all().delete()
            Animal.objects.update(father=None, mother=None)
            Animal.objects.all().delete()
            Pen.objects.all().delete()

    def get_user(self):
        user = User.objects.filter(role=User.UserRole.ADMIN).first() or User.objects.first()
        if user is None:
            raise CommandError('Create a user first (python manage.py create_feedlot_admin)')
        return user

    def create_pens(self):
        pens = []
        for index, capacity in enumerate((20, 20, 10), start=1):
            pen, _ = Pen.objects.get_or_create(
                name=f'Pen {index}',
                defaults={'capacity': capacity, 'daily_cost': Decimal('30.00') + index * 5},
            )
            pens.append(pen)
        return pens

    def create_animals(self, pens, count, user):
        today = timezone.localdate()
        animals = []
        for _ in range(count):
            entry_weight = Decimal(random.randint(240, 320))
            animal = Animal.objects.create(
                name=f'Steer {Animal.objects.count() + 1:03d}',
                tag=f'DEMO-{random.randint(0, 999999):06d}',
                breed=random.choice(BREEDS),
                sex=Animal.Sex.MALE,
                castrated=random.random() < 0.5,
                pen=random.choice(pens),
                entry_date=today - timedelta(days=random.randint(30, 120)),
                entry_weight=entry_weight,
                current_weight=entry_weight + random.randint(20, 90),
                created_by=user,
            )
            animals.append(animal)
        return animals

    def create_foods(self, user):
        foods = []
        for name, unit, min_stock, unit_cost in FOODS:
            food, _ = Food.objects.get_or_create(
                name=name,
                defaults={'unit': unit, 'min_stock': min_stock, 'unit_cost': unit_cost},
            )
            record_movement(food.id, StockMovement.MovementType.ENTRY, min_stock * 3,
                            notes='Initial purchase', actor=user)
            record_movement(food.id, StockMovement.MovementType.EXIT, min_stock * 2,
                            notes='Daily rations', actor=user)
            foods.append(food)
        return foods

    def create_costs(self, animals, user):
        today = timezone.localdate()
        costs = []
        for animal in animals:
            for category in (CostCategory.FOOD, CostCategory.VETERINARY):
                costs.append(Cost.objects.create(
                    animal=animal,
                    category=category,
                    description=f'{category.label} for {animal.tag}',
                    amount=Decimal(random.randint(20, 200)),
                    date=today.replace(day=1),
                    created_by=user,
                ))
        costs.append(Cost.objects.create(
            category=CostCategory.OTHER,
            description='Fence repair',
            amount=Decimal('350.00'),
            date=today.replace(day=1),
            created_by=user,
        ))
        return costs
