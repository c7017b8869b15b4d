"""
Mod Scan - Modifier Names
Static phrase → identifier data used to build the default ModifierTable.

MOD_NAME_LIST maps a lowercase modifier phrase (as it appears on an item,
numbers removed) to one identifier or a tuple of identifiers when the phrase
affects several attributes at once.

MOD_FORM_LIST maps a regex for the numeric "form" of a mod line to a form
tag. The form scan runs before the name scan and captures the numbers.
"""

# Forms are searched against the lowercased line, so patterns are lowercase.
MOD_FORM_LIST = {
    r"^(\d+)% increased": "INC",
    r"^(\d+)% faster": "INC",
    r"^(\d+)% reduced": "RED",
    r"^(\d+)% slower": "RED",
    r"^(\d+)% more": "MORE",
    r"^(\d+)% less": "LESS",
    r"^([+\-][\d.]+)%?": "BASE",
    r"^([+\-][\d.]+)%? to": "BASE",
    r"^([+\-]?[\d.]+)%? of": "BASE",
    r"^([+\-][\d.]+)%? base": "BASE",
    r"^([+\-]?[\d.]+)%? additional": "BASE",
    r"^you gain ([\d.]+)": "BASE",
    r"^gains? ([\d.]+)% of": "BASE",
    r"^([+\-]?\d+)% chance": "CHANCE",
    r"^([+\-]?\d+)% additional chance": "CHANCE",
    r"penetrates? (\d+)%": "PEN",
    r"penetrates (\d+)% of": "PEN",
    r"penetrates (\d+)% of enemy": "PEN",
    r"^([\d.]+) (.+) regenerated per second": "REGENFLAT",
    r"^([\d.]+)% (.+) regenerated per second": "REGENPERCENT",
    r"^([\d.]+)% of (.+) regenerated per second": "REGENPERCENT",
    r"^regenerate ([\d.]+) (.+) per second": "REGENFLAT",
    r"^regenerate ([\d.]+)% (.+) per second": "REGENPERCENT",
    r"^regenerate ([\d.]+)% of (.+) per second": "REGENPERCENT",
    r"^regenerate ([\d.]+)% of your (.+) per second": "REGENPERCENT",
    r"^([\d.]+) ([a-z]+) damage taken per second": "DEGEN",
    r"^([\d.]+) ([a-z]+) damage per second": "DEGEN",
    r"(\d+) to (\d+) added ([a-z]+) damage": "DMG",
    r"(\d+)-(\d+) added ([a-z]+) damage": "DMG",
    r"(\d+) to (\d+) additional ([a-z]+) damage": "DMG",
    r"(\d+)-(\d+) additional ([a-z]+) damage": "DMG",
    r"^(\d+) to (\d+) ([a-z]+) damage": "DMG",
    r"adds (\d+) to (\d+) ([a-z]+) damage": "DMG",
    r"adds (\d+)-(\d+) ([a-z]+) damage": "DMG",
    r"adds (\d+) to (\d+) ([a-z]+) damage to attacks": "DMGATTACKS",
    r"adds (\d+)-(\d+) ([a-z]+) damage to attacks": "DMGATTACKS",
    r"adds (\d+) to (\d+) ([a-z]+) attack damage": "DMGATTACKS",
    r"adds (\d+)-(\d+) ([a-z]+) attack damage": "DMGATTACKS",
    r"adds (\d+) to (\d+) ([a-z]+) damage to spells": "DMGSPELLS",
    r"adds (\d+)-(\d+) ([a-z]+) damage to spells": "DMGSPELLS",
    r"adds (\d+) to (\d+) ([a-z]+) spell damage": "DMGSPELLS",
    r"adds (\d+)-(\d+) ([a-z]+) spell damage": "DMGSPELLS",
    r"adds (\d+) to (\d+) ([a-z]+) damage to attacks and spells": "DMGBOTH",
    r"adds (\d+)-(\d+) ([a-z]+) damage to attacks and spells": "DMGBOTH",
    r"adds (\d+) to (\d+) ([a-z]+) damage to spells and attacks": "DMGBOTH",
    r"adds (\d+)-(\d+) ([a-z]+) damage to spells and attacks": "DMGBOTH",
    r"adds (\d+) to (\d+) ([a-z]+) damage to hits": "DMGBOTH",
    r"adds (\d+)-(\d+) ([a-z]+) damage to hits": "DMGBOTH",
}

# Form tags whose captured value is a decrease
NEGATIVE_FORMS = frozenset({"RED", "LESS"})

MOD_NAME_LIST = {
    # Attributes
    "strength": "Str",
    "dexterity": "Dex",
    "intelligence": "Int",
    "strength and dexterity": ("Str", "Dex"),
    "strength and intelligence": ("Str", "Int"),
    "dexterity and intelligence": ("Dex", "Int"),
    "attributes": ("Str", "Dex", "Int"),
    "all attributes": ("Str", "Dex", "Int"),
    # Life/mana
    "life": "Life",
    "maximum life": "Life",
    "mana": "Mana",
    "maximum mana": "Mana",
    "mana regeneration": "ManaRegen",
    "mana regeneration rate": "ManaRegen",
    "mana cost": "ManaCost",
    "mana cost of": "ManaCost",
    "mana cost of skills": "ManaCost",
    "total mana cost of skills": "ManaCost",
    "mana reserved": "ManaReserved",
    "mana reservation": "ManaReserved",
    "mana reservation of skills": "ManaReserved",
    # Primary defences
    "maximum energy shield": "EnergyShield",
    "energy shield recharge rate": "EnergyShieldRecharge",
    "start of energy shield recharge": "EnergyShieldRechargeFaster",
    "armour": "Armour",
    "evasion": "Evasion",
    "evasion rating": "Evasion",
    "energy shield": "EnergyShield",
    "armour and evasion": "ArmourAndEvasion",
    "armour and evasion rating": "ArmourAndEvasion",
    "evasion rating and armour": "ArmourAndEvasion",
    "armour and energy shield": "ArmourAndEnergyShield",
    "evasion rating and energy shield": "EvasionAndEnergyShield",
    "evasion and energy shield": "EvasionAndEnergyShield",
    "armour, evasion and energy shield": "Defences",
    "defences": "Defences",
    "to evade": "EvadeChance",
    "chance to evade": "EvadeChance",
    "to evade attacks": "EvadeChance",
    "chance to evade attacks": "EvadeChance",
    "chance to evade projectile attacks": "ProjectileEvadeChance",
    "chance to evade melee attacks": "MeleeEvadeChance",
    # Resistances
    "physical damage reduction": "PhysicalDamageReduction",
    "physical damage reduction from hits": "PhysicalDamageReductionWhenHit",
    "fire resistance": "FireResist",
    "maximum fire resistance": "FireResistMax",
    "cold resistance": "ColdResist",
    "maximum cold resistance": "ColdResistMax",
    "lightning resistance": "LightningResist",
    "maximum lightning resistance": "LightningResistMax",
    "chaos resistance": "ChaosResist",
    "fire and cold resistances": ("FireResist", "ColdResist"),
    "fire and lightning resistances": ("FireResist", "LightningResist"),
    "cold and lightning resistances": ("ColdResist", "LightningResist"),
    "elemental resistances": "ElementalResist",
    "all elemental resistances": "ElementalResist",
    "all resistances": ("ElementalResist", "ChaosResist"),
    "all maximum elemental resistances": ("FireResistMax", "ColdResistMax", "LightningResistMax"),
    "all maximum resistances": ("FireResistMax", "ColdResistMax", "LightningResistMax", "ChaosResistMax"),
    "fire and chaos resistances": ("FireResist", "ChaosResist"),
    "cold and chaos resistances": ("ColdResist", "ChaosResist"),
    "lightning and chaos resistances": ("LightningResist", "ChaosResist"),
    # Damage taken
    "damage taken": "DamageTaken",
    "damage taken when hit": "DamageTakenWhenHit",
    "damage taken from damage over time": "DamageTakenOverTime",
    "physical damage taken": "PhysicalDamageTaken",
    "physical damage from hits taken": "PhysicalDamageTaken",
    "physical damage taken when hit": "PhysicalDamageTakenWhenHit",
    "physical damage taken over time": "PhysicalDamageTakenOverTime",
    "lightning damage taken": "LightningDamageTaken",
    "lightning damage from hits taken": "LightningDamageTaken",
    "lightning damage taken when hit": "LightningDamageTakenWhenHit",
    "lightning damage taken over time": "LightningDamageTakenOverTime",
    "cold damage taken": "ColdDamageTaken",
    "cold damage from hits taken": "ColdDamageTaken",
    "cold damage taken when hit": "ColdDamageTakenWhenHit",
    "cold damage taken over time": "ColdDamageTakenOverTime",
    "fire damage taken": "FireDamageTaken",
    "fire damage from hits taken": "FireDamageTaken",
    "fire damage taken when hit": "FireDamageTakenWhenHit",
    "fire damage taken over time": "FireDamageTakenOverTime",
    "chaos damage taken": "ChaosDamageTaken",
    "chaos damage from hits taken": "ChaosDamageTaken",
    "chaos damage taken when hit": "ChaosDamageTakenWhenHit",
    "chaos damage taken over time": "ChaosDamageTakenOverTime",
    "elemental damage taken": "ElementalDamageTaken",
    "elemental damage taken when hit": "ElementalDamageTakenWhenHit",
    "elemental damage taken over time": "ElementalDamageTakenOverTime",
    # Other defences
    "to dodge attacks": "AttackDodgeChance",
    "to dodge attack hits": "AttackDodgeChance",
    "to dodge spells": "SpellDodgeChance",
    "to dodge spell hits": "SpellDodgeChance",
    "to dodge spell damage": "SpellDodgeChance",
    "to dodge attacks and spells": ("AttackDodgeChance", "SpellDodgeChance"),
    "to dodge attacks and spell damage": ("AttackDodgeChance", "SpellDodgeChance"),
    "to dodge attack and spell hits": ("AttackDodgeChance", "SpellDodgeChance"),
    "to block": "BlockChance",
    "to block attacks": "BlockChance",
    "to block attack damage": "BlockChance",
    "block chance": "BlockChance",
    "block chance with staves": "BlockChance",
    "to block with staves": "BlockChance",
    "spell block chance": "SpellBlockChance",
    "to block spells": "SpellBlockChance",
    "to block spell damage": "SpellBlockChance",
    "chance to block attacks and spells": ("BlockChance", "SpellBlockChance"),
    "maximum block chance": "BlockChanceMax",
    "maximum chance to block attack damage": "BlockChanceMax",
    "maximum chance to block spell damage": "SpellBlockChanceMax",
    "to avoid being stunned": "AvoidStun",
    "to avoid being shocked": "AvoidShock",
    "to avoid being frozen": "AvoidFrozen",
    "to avoid being chilled": "AvoidChilled",
    "to avoid being ignited": "AvoidIgnite",
    "to avoid elemental ailments": ("AvoidShock", "AvoidFrozen", "AvoidChilled", "AvoidIgnite"),
    "to avoid elemental status ailments": ("AvoidShock", "AvoidFrozen", "AvoidChilled", "AvoidIgnite"),
    "to avoid bleeding": "AvoidBleed",
    "damage is taken from mana before life": "DamageTakenFromManaBeforeLife",
    "damage taken from mana before life": "DamageTakenFromManaBeforeLife",
    "effect of curses on you": "CurseEffectOnSelf",
    "life recovery rate": "LifeRecoveryRate",
    "mana recovery rate": "ManaRecoveryRate",
    "energy shield recovery rate": "EnergyShieldRecoveryRate",
    "recovery rate of life, mana and energy shield": ("LifeRecoveryRate", "ManaRecoveryRate", "EnergyShieldRecoveryRate"),
    # Stun/knockback modifiers
    "stun recovery": "StunRecovery",
    "stun and block recovery": "StunRecovery",
    "block and stun recovery": "StunRecovery",
    "stun threshold": "StunThreshold",
    "block recovery": "BlockRecovery",
    "enemy stun threshold": "EnemyStunThreshold",
    "stun duration on enemies": "EnemyStunDuration",
    "stun duration": "EnemyStunDuration",
    "to knock enemies back on hit": "EnemyKnockbackChance",
    "knockback distance": "EnemyKnockbackDistance",
    # Auras/curses/buffs
    "aura effect": "AuraEffect",
    "effect of non-curse auras you cast": "AuraEffect",
    "effect of non-curse auras from your skills": "AuraEffect",
    "effect of your curses": "CurseEffect",
    "effect of auras on you": "AuraEffectOnSelf",
    "effect of auras on your minions": "AuraEffectOnSelf",
    "curse effect": "CurseEffect",
    "curse duration": "Duration",
    "radius of auras": "AreaOfEffect",
    "radius of curses": "AreaOfEffect",
    "buff effect": "BuffEffect",
    "effect of buffs on you": "BuffEffectOnSelf",
    "effect of buffs granted by your golems": "BuffEffect",
    "effect of buffs granted by socketed golem skills": "BuffEffect",
    "effect of the buff granted by your stone golems": "BuffEffect",
    "effect of the buff granted by your lightning golems": "BuffEffect",
    "effect of the buff granted by your ice golems": "BuffEffect",
    "effect of the buff granted by your flame golems": "BuffEffect",
    "effect of the buff granted by your chaos golems": "BuffEffect",
    "effect of offering spells": "BuffEffect",
    "effect of heralds on you": "BuffEffect",
    "warcry effect": "BuffEffect",
    "aspect of the avian buff effect": "BuffEffect",
    # Charges
    "maximum power charge": "PowerChargesMax",
    "maximum power charges": "PowerChargesMax",
    "minimum power charge": "PowerChargesMin",
    "minimum power charges": "PowerChargesMin",
    "power charge duration": "PowerChargesDuration",
    "maximum frenzy charge": "FrenzyChargesMax",
    "maximum frenzy charges": "FrenzyChargesMax",
    "minimum frenzy charge": "FrenzyChargesMin",
    "minimum frenzy charges": "FrenzyChargesMin",
    "frenzy charge duration": "FrenzyChargesDuration",
    "maximum endurance charge": "EnduranceChargesMax",
    "maximum endurance charges": "EnduranceChargesMax",
    "minimum endurance charge": "EnduranceChargesMin",
    "minimum endurance charges": "EnduranceChargesMin",
    "endurance charge duration": "EnduranceChargesDuration",
    "maximum frenzy charges and maximum power charges": ("FrenzyChargesMax", "PowerChargesMax"),
    "endurance, frenzy and power charge duration": ("PowerChargesDuration", "FrenzyChargesDuration", "EnduranceChargesDuration"),
    "maximum siphoning charge": "SiphoningChargesMax",
    "maximum siphoning charges": "SiphoningChargesMax",
    "maximum number of crab barriers": "CrabBarriersMax",
    # On hit/kill/leech effects
    "life gained on kill": "LifeOnKill",
    "mana gained on kill": "ManaOnKill",
    "life gained for each enemy hit": "LifeOnHit",
    "life gained for each enemy hit by attacks": "LifeOnHit",
    "life gained for each enemy hit by your attacks": "LifeOnHit",
    "life gained for each enemy hit by spells": "LifeOnHit",
    "life gained for each enemy hit by your spells": "LifeOnHit",
    "mana gained for each enemy hit by attacks": "ManaOnHit",
    "mana gained for each enemy hit by your attacks": "ManaOnHit",
    "energy shield gained for each enemy hit": "EnergyShieldOnHit",
    "energy shield gained for each enemy hit by attacks": "EnergyShieldOnHit",
    "energy shield gained for each enemy hit by your attacks": "EnergyShieldOnHit",
    "life and mana gained for each enemy hit": ("LifeOnHit", "ManaOnHit"),
    "damage as life": "DamageLifeLeech",
    "life leeched per second": "LifeLeechRate",
    "mana leeched per second": "ManaLeechRate",
    "maximum life per second to maximum life leech rate": "MaxLifeLeechRate",
    "maximum mana per second to maximum mana leech rate": "MaxManaLeechRate",
    # Projectile modifiers
    "projectile": "ProjectileCount",
    "projectiles": "ProjectileCount",
    "projectile speed": "ProjectileSpeed",
    "arrow speed": "ProjectileSpeed",
    # Totem/trap/mine modifiers
    "totem placement speed": "TotemPlacementSpeed",
    "totem life": "TotemLife",
    "totem duration": "TotemDuration",
    "maximum number of summoned totems": "ActiveTotemLimit",
    "trap throwing speed": "TrapThrowingSpeed",
    "trap trigger area of effect": "TrapTriggerAreaOfEffect",
    "trap duration": "TrapDuration",
    "cooldown recovery speed for throwing traps": "CooldownRecovery",
    "mine laying speed": "MineLayingSpeed",
    "mine detonation area of effect": "MineDetonationAreaOfEffect",
    "mine duration": "MineDuration",
    # Minion modifiers
    "maximum number of skeletons": "ActiveSkeletonLimit",
    "maximum number of zombies": "ActiveZombieLimit",
    "number of zombies allowed": "ActiveZombieLimit",
    "maximum number of spectres": "ActiveSpectreLimit",
    "maximum number of golems": "ActiveGolemLimit",
    "maximum number of summoned golems": "ActiveGolemLimit",
    "maximum number of summoned raging spirits": "ActiveRagingSpiritLimit",
    "maximum number of summoned holy relics": "ActiveHolyRelicLimit",
    "minion duration": "Duration",
    "skeleton duration": "Duration",
    "sentinel of dominance duration": "Duration",
    # Other skill modifiers
    "radius": "AreaOfEffect",
    "radius of area skills": "AreaOfEffect",
    "area of effect radius": "AreaOfEffect",
    "area of effect": "AreaOfEffect",
    "area of effect of skills": "AreaOfEffect",
    "area of effect of area skills": "AreaOfEffect",
    "aspect of the spider area of effect": "AreaOfEffect",
    "firestorm explosion area of effect": "AreaOfEffectSecondary",
    "duration": "Duration",
    "skill effect duration": "Duration",
    "chaos skill effect duration": "Duration",
    "aspect of the spider debuff duration": "Duration",
    "fire trap burning ground duration": "Duration",
    "cooldown recovery": "CooldownRecovery",
    "cooldown recovery speed": "CooldownRecovery",
    "weapon range": "WeaponRange",
    "melee weapon range": "MeleeWeaponRange",
    "melee weapon and unarmed range": ("MeleeWeaponRange", "UnarmedRange"),
    "melee weapon and unarmed attack range": ("MeleeWeaponRange", "UnarmedRange"),
    "to deal double damage": "DoubleDamageChance",
    "activation frequency": "BrandActivationFrequency",
    "brand activation frequency": "BrandActivationFrequency",
    # Buffs
    "onslaught effect": "OnslaughtEffect",
    "fortify duration": "FortifyDuration",
    "effect of fortify on you": "FortifyEffectOnSelf",
    "effect of tailwind on you": "TailwindEffectOnSelf",
    # Basic damage types
    "damage": "Damage",
    "physical damage": "PhysicalDamage",
    "lightning damage": "LightningDamage",
    "cold damage": "ColdDamage",
    "fire damage": "FireDamage",
    "chaos damage": "ChaosDamage",
    "non-chaos damage": "NonChaosDamage",
    "elemental damage": "ElementalDamage",
    # Other damage forms
    "attack damage": "Damage",
    "attack physical damage": "PhysicalDamage",
    "physical attack damage": "PhysicalDamage",
    "physical weapon damage": "PhysicalDamage",
    "physical damage with weapons": "PhysicalDamage",
    "physical melee damage": "PhysicalDamage",
    "melee physical damage": "PhysicalDamage",
    "projectile damage": "Damage",
    "projectile attack damage": "Damage",
    "bow damage": "Damage",
    "damage with arrow hits": "Damage",
    "wand damage": "Damage",
    "wand physical damage": "PhysicalDamage",
    "claw physical damage": "PhysicalDamage",
    "sword physical damage": "PhysicalDamage",
    "damage over time": "Damage",
    "physical damage over time": "PhysicalDamage",
    "burning damage": "FireDamage",
    "damage with ignite": "Damage",
    "damage with ignites": "Damage",
    "incinerate damage for each stage": "Damage",
    "non-ailment chaos damage over time multiplier": "ChaosDotMultiplier",
    "cold damage over time multiplier": "ColdDotMultiplier",
    # Crit/accuracy/speed modifiers
    "critical strike chance": "CritChance",
    "attack critical strike chance": "CritChance",
    "critical strike multiplier": "CritMultiplier",
    "accuracy": "Accuracy",
    "accuracy rating": "Accuracy",
    "minion accuracy rating": "Accuracy",
    "attack speed": "Speed",
    "cast speed": "Speed",
    "attack and cast speed": "Speed",
    "attack and movement speed": ("Speed", "MovementSpeed"),
    # Elemental ailments
    "to shock": "EnemyShockChance",
    "shock chance": "EnemyShockChance",
    "to freeze": "EnemyFreezeChance",
    "freeze chance": "EnemyFreezeChance",
    "to ignite": "EnemyIgniteChance",
    "ignite chance": "EnemyIgniteChance",
    "to freeze, shock and ignite": ("EnemyFreezeChance", "EnemyShockChance", "EnemyIgniteChance"),
    "effect of shock": "EnemyShockEffect",
    "effect of chill": "EnemyChillEffect",
    "effect of chill on you": "SelfChillEffect",
    "effect of non-damaging ailments": ("EnemyShockEffect", "EnemyChillEffect", "EnemyFreezeEffect"),
    "shock duration": "EnemyShockDuration",
    "freeze duration": "EnemyFreezeDuration",
    "chill duration": "EnemyChillDuration",
    "ignite duration": "EnemyIgniteDuration",
    "duration of elemental ailments": ("EnemyShockDuration", "EnemyFreezeDuration", "EnemyChillDuration", "EnemyIgniteDuration"),
    "duration of elemental status ailments": ("EnemyShockDuration", "EnemyFreezeDuration", "EnemyChillDuration", "EnemyIgniteDuration"),
    "duration of ailments": ("EnemyShockDuration", "EnemyFreezeDuration", "EnemyChillDuration", "EnemyIgniteDuration", "EnemyPoisonDuration", "EnemyBleedDuration"),
    # Other ailments
    "to poison": "PoisonChance",
    "to cause poison": "PoisonChance",
    "to poison on hit": "PoisonChance",
    "poison duration": "EnemyPoisonDuration",
    "duration of poisons you inflict": "EnemyPoisonDuration",
    "to cause bleeding": "BleedChance",
    "to cause bleeding on hit": "BleedChance",
    "to inflict bleeding": "BleedChance",
    "to inflict bleeding on hit": "BleedChance",
    "bleed duration": "EnemyBleedDuration",
    "bleeding duration": "EnemyBleedDuration",
    # Misc modifiers
    "movement speed": "MovementSpeed",
    "attack, cast and movement speed": ("Speed", "MovementSpeed"),
    "light radius": "LightRadius",
    "rarity of items found": "LootRarity",
    "quantity of items found": "LootQuantity",
    "item quantity": "LootQuantity",
    "strength requirement": "StrRequirement",
    "dexterity requirement": "DexRequirement",
    "intelligence requirement": "IntRequirement",
    "attribute requirements": ("StrRequirement", "DexRequirement", "IntRequirement"),
    "effect of socketed jewels": "SocketedJewelEffect",
    # Flask modifiers
    "effect": "FlaskEffect",
    "effect of flasks": "FlaskEffect",
    "effect of flasks on you": "FlaskEffect",
    "amount recovered": "FlaskRecovery",
    "life recovered": "FlaskRecovery",
    "mana recovered": "FlaskRecovery",
    "life recovery from flasks": "FlaskLifeRecovery",
    "mana recovery from flasks": "FlaskManaRecovery",
    "flask effect duration": "FlaskDuration",
    "recovery speed": "FlaskRecoveryRate",
    "recovery rate": "FlaskRecoveryRate",
    "flask recovery rate": "FlaskRecoveryRate",
    "flask recovery speed": "FlaskRecoveryRate",
    "flask life recovery rate": "FlaskLifeRecoveryRate",
    "flask mana recovery rate": "FlaskManaRecoveryRate",
    "extra charges": "FlaskCharges",
    "maximum charges": "FlaskCharges",
    "charges used": "FlaskChargesUsed",
    "flask charges used": "FlaskChargesUsed",
    "flask charges gained": "FlaskChargesGained",
    "charge recovery": "FlaskChargeRecovery",
}
